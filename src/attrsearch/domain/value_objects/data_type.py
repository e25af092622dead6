"""Attribute data type."""

from collections.abc import Mapping
from enum import StrEnum


class DataType(StrEnum):
    """Supported attribute value types."""

    TEXT = "TEXT"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    SINGLE_SELECT = "SINGLE_SELECT"
    MULTI_SELECT = "MULTI_SELECT"
    DATE = "DATE"

    @property
    def requires_options(self) -> bool:
        return self in (DataType.SINGLE_SELECT, DataType.MULTI_SELECT)


def require_exhaustive(table: Mapping[DataType, object], name: str) -> None:
    """Fail fast when a dispatch table does not cover every DataType."""
    missing = set(DataType) - set(table)
    if missing:
        raise RuntimeError(
            f"{name} has no entry for: {', '.join(sorted(missing))}"
        )
