"""Repository ports."""

from attrsearch.application.ports.repositories.attribute_repository import (
    AttributeRepository,
)
from attrsearch.application.ports.repositories.hierarchy_repository import (
    HierarchyRepository,
)
from attrsearch.application.ports.repositories.listing_repository import (
    ListingRepository,
)
from attrsearch.application.ports.repositories.option_repository import (
    AttributeOptionRepository,
)
from attrsearch.application.ports.repositories.saved_search_repository import (
    SavedSearchRepository,
)
from attrsearch.application.ports.repositories.user_repository import UserRepository
from attrsearch.application.ports.repositories.value_repository import (
    AttributeValueRepository,
)

__all__ = [
    "AttributeOptionRepository",
    "AttributeRepository",
    "AttributeValueRepository",
    "HierarchyRepository",
    "ListingRepository",
    "SavedSearchRepository",
    "UserRepository",
]
