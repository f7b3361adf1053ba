"""
Integration tests for the parcel-tracker command line.

Each test runs the CLI against a file database in tmp_path, the way a
user would across separate invocations.
"""

import pytest

from parcel_tracker.main import main
from parcel_tracker.utils.config import reset_config


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{(tmp_path / 'tracker.db').as_posix()}"


@pytest.fixture
def run(db_url, capsys):
    def _run(*args):
        code = main(["--db", db_url, *args])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


class TestParcelLifecycle:
    def test_init_creates_database(self, run, tmp_path):
        code, out, _ = run("init")

        assert code == 0
        assert "Database ready" in out
        assert (tmp_path / "tracker.db").exists()

    def test_register_show_advance(self, run):
        code, out, _ = run("register", "1000", "Pushkina 10")
        assert code == 0
        assert "Registered Parcel #1: client 1000, address Pushkina 10, status registered" in out

        code, out, _ = run("advance", "1")
        assert code == 0
        assert "Parcel #1 is now sent" in out

        code, out, _ = run("show", "1")
        assert code == 0
        assert "status sent" in out

    def test_list_client_parcels(self, run):
        run("register", "5", "first")
        run("register", "6", "other")
        run("register", "5", "second")

        code, out, _ = run("list", "5")

        assert code == 0
        assert "Parcels of client 5:" in out
        assert "address first" in out
        assert "address second" in out
        assert "address other" not in out

    def test_list_client_without_parcels(self, run):
        code, out, _ = run("list", "12345")

        assert code == 0
        assert "Client 12345 has no parcels" in out

    def test_set_address_and_delete(self, run):
        run("register", "1", "old")

        code, out, _ = run("set-address", "1", "new")
        assert code == 0
        assert "delivered to new" in out

        code, _, _ = run("delete", "1")
        assert code == 0

        code, _, err = run("show", "1")
        assert code == 1
        assert "Parcel with number 1 not found" in err


class TestErrors:
    def test_show_unknown_parcel(self, run):
        code, _, err = run("show", "99")

        assert code == 1
        assert err.startswith("ERROR:")

    def test_advance_past_delivered(self, run):
        run("register", "1", "a")
        run("advance", "1")
        run("advance", "1")

        code, _, err = run("advance", "1")

        assert code == 1
        assert "already delivered" in err

    def test_change_address_of_sent_parcel(self, run):
        run("register", "1", "a")
        run("advance", "1")

        code, _, err = run("set-address", "1", "b")

        assert code == 1
        assert "only registered parcels allow it" in err

    def test_register_requires_address(self, run):
        code, _, err = run("register", "1", "  ")

        assert code == 1
        assert "Address is required" in err

    def test_missing_command_exits(self, db_url):
        with pytest.raises(SystemExit):
            main(["--db", db_url])

    def test_unopenable_database_reports_error(self, tmp_path, capsys):
        missing_dir = (tmp_path / "missing" / "tracker.db").as_posix()

        code = main(["--db", f"sqlite:///{missing_dir}", "list", "1"])

        assert code == 1
        assert capsys.readouterr().err.startswith("ERROR: Database error:")

    def test_unknown_environment_reports_error(self, monkeypatch, capsys):
        monkeypatch.delenv("PARCEL_TRACKER_DATABASE_URL", raising=False)
        monkeypatch.setenv("PARCEL_TRACKER_ENV", "staging")
        reset_config()
        try:
            code = main(["list", "1"])
        finally:
            reset_config()

        assert code == 1
        assert "Unknown environment 'staging'" in capsys.readouterr().err
