"""Attribute display grouping."""

from enum import StrEnum


class AttributeCategory(StrEnum):
    """Categories attributes are grouped and ordered in."""

    BASIC = "BASIC"
    STRUCTURE = "STRUCTURE"
    FEATURES = "FEATURES"
    FINANCIAL = "FINANCIAL"
    LOCATION = "LOCATION"
