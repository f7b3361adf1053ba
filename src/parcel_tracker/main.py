"""
Command-line entry point for Parcel Tracker.

Usage Examples:
    # Create the database tables
    parcel-tracker init

    # Register a parcel for client 1000
    parcel-tracker register 1000 "Pushkina 10, Moscow"

    # List the parcels of client 1000
    parcel-tracker list 1000

    # Move parcel 7 to its next status
    parcel-tracker advance 7

    # Use another database
    parcel-tracker --db sqlite:///./tracker.db show 7
"""

import argparse
import logging
import sys
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from .services import database, parcel_service
from .services.exceptions import ServiceError
from .utils.config import get_config

logger = logging.getLogger(__name__)


def cmd_init(args) -> int:
    print(f"Database ready: {database.get_engine().url}")
    return 0


def cmd_register(args) -> int:
    parcel = parcel_service.register_parcel(args.client, args.address)
    print(f"Registered {parcel_service.format_parcel(parcel)}")
    return 0


def cmd_show(args) -> int:
    parcel = parcel_service.get_parcel(args.number)
    print(parcel_service.format_parcel(parcel))
    return 0


def cmd_list(args) -> int:
    parcels = parcel_service.get_client_parcels(args.client)
    if not parcels:
        print(f"Client {args.client} has no parcels")
        return 0

    print(f"Parcels of client {args.client}:")
    for parcel in parcels:
        print(f"  {parcel_service.format_parcel(parcel)}")
    return 0


def cmd_advance(args) -> int:
    status = parcel_service.advance_status(args.number)
    print(f"Parcel #{args.number} is now {status.value}")
    return 0


def cmd_set_address(args) -> int:
    parcel_service.change_address(args.number, args.address)
    print(f"Parcel #{args.number} will be delivered to {args.address}")
    return 0


def cmd_delete(args) -> int:
    parcel_service.delete_parcel(args.number)
    print(f"Parcel #{args.number} deleted")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parcel-tracker",
        description="Track parcels from registration to delivery",
    )
    parser.add_argument(
        "--db",
        dest="database_url",
        help="SQLAlchemy database URL (default: configured tracker.db)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="Create database tables")
    init_parser.set_defaults(func=cmd_init)

    register_parser = subparsers.add_parser("register", help="Register a new parcel")
    register_parser.add_argument("client", type=int, help="Client identifier")
    register_parser.add_argument("address", help="Delivery address")
    register_parser.set_defaults(func=cmd_register)

    show_parser = subparsers.add_parser("show", help="Show one parcel")
    show_parser.add_argument("number", type=int, help="Parcel number")
    show_parser.set_defaults(func=cmd_show)

    list_parser = subparsers.add_parser("list", help="List parcels of a client")
    list_parser.add_argument("client", type=int, help="Client identifier")
    list_parser.set_defaults(func=cmd_list)

    advance_parser = subparsers.add_parser("advance", help="Move a parcel to its next status")
    advance_parser.add_argument("number", type=int, help="Parcel number")
    advance_parser.set_defaults(func=cmd_advance)

    address_parser = subparsers.add_parser("set-address", help="Change a registered parcel's address")
    address_parser.add_argument("number", type=int, help="Parcel number")
    address_parser.add_argument("address", help="New delivery address")
    address_parser.set_defaults(func=cmd_set_address)

    delete_parser = subparsers.add_parser("delete", help="Delete a registered parcel")
    delete_parser.add_argument("number", type=int, help="Parcel number")
    delete_parser.set_defaults(func=cmd_delete)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main application entry point.

    Returns:
        Process exit code: 0 on success, 1 on a service, database or configuration error
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.database_url:
            database.configure_database(args.database_url)
        else:
            logger.debug(f"Using {get_config()}")
        database.initialize_app_database()
        return args.func(args)
    except ServiceError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except SQLAlchemyError as e:
        logger.debug("Database failure", exc_info=True)
        print(f"ERROR: Database error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # Invalid configuration, e.g. an unknown PARCEL_TRACKER_ENV
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        database.close_connections()


if __name__ == "__main__":
    sys.exit(main())
