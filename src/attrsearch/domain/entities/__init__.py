"""Domain entities."""

from attrsearch.domain.entities.attribute import Attribute
from attrsearch.domain.entities.attribute_option import AttributeOption
from attrsearch.domain.entities.attribute_value import AttributeValue
from attrsearch.domain.entities.hierarchy_edge import HierarchyEdge
from attrsearch.domain.entities.listing import Listing
from attrsearch.domain.entities.saved_search import SavedSearch
from attrsearch.domain.entities.user import Actor, User

__all__ = [
    "Actor",
    "Attribute",
    "AttributeOption",
    "AttributeValue",
    "HierarchyEdge",
    "Listing",
    "SavedSearch",
    "User",
]
