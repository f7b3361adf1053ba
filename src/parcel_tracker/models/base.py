"""
Base model class for all database models.

Provides common functionality for all models:
- SQLAlchemy declarative base
- Utility methods (to_dict)
"""

from typing import Any, Dict

from sqlalchemy.orm import declarative_base

# Create the declarative base for all models
Base = declarative_base()


class BaseModel(Base):
    """
    Abstract base model with common methods.

    Subclasses declare their own columns, including the primary key.
    """

    __abstract__ = True

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert model instance to dictionary.

        Returns:
            Dictionary representation of the model
        """
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}

