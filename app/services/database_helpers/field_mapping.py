# /halaqat-backend/app/services/database_helpers/field_mapping.py

"""
Name translation between the application's camelCase field names and the
relational schema's snake_case column names.
"""

import re
from typing import Any, Dict

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_column(field_name: str) -> str:
    """'circleName' -> 'circle_name'"""
    return _CAMEL_BOUNDARY.sub("_", field_name).lower()


def to_field(column_name: str) -> str:
    """'last_five_pages' -> 'lastFivePages'"""
    head, *rest = column_name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def record_to_columns(record: Dict[str, Any]) -> Dict[str, Any]:
    return {to_column(key): value for key, value in record.items()}


def row_to_record(row) -> Dict[str, Any]:
    """Converts a SQLAlchemy ORM row into an application-named dictionary."""
    return {to_field(c.name): getattr(row, c.name) for c in row.__table__.columns}
