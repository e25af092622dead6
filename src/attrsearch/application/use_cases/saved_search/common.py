"""Shared saved search checks."""

from uuid import UUID

from attrsearch.application.dto.saved_search_dto import SavedSearchInput, SavedSearchOutput
from attrsearch.application.ports import FilterCodec, UnitOfWork
from attrsearch.domain.entities import SavedSearch
from attrsearch.domain.exceptions import NotFound, PermissionDenied, ValidationError

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


def validate_saved_search_input(input_data: SavedSearchInput) -> None:
    """Check name and description; filters are validated by the engine."""
    if input_data.name is None or not input_data.name.strip():
        raise ValidationError("Search name is required")
    if len(input_data.name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Search name must be at most {NAME_MAX_LENGTH} characters")
    if input_data.description is not None and len(input_data.description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Search description must be at most {DESCRIPTION_MAX_LENGTH} characters"
        )


async def load_owned(uow: UnitOfWork, saved_search_id: UUID, caller_id: UUID) -> SavedSearch:
    """Load saved search; NotFound if missing, PermissionDenied if not the caller's."""
    saved = await uow.saved_searches.get_by_id(saved_search_id)
    if not saved:
        raise NotFound("Saved search", saved_search_id)
    if saved.owner_id != caller_id:
        raise PermissionDenied("Access denied: saved search belongs to another user")
    return saved


def to_output(saved: SavedSearch, codec: FilterCodec) -> SavedSearchOutput:
    return SavedSearchOutput(
        id=saved.id,
        owner_id=saved.owner_id,
        name=saved.name,
        description=saved.description,
        filters=codec.decode(saved.filters_encoded),
        created_at=saved.created_at,
        updated_at=saved.updated_at,
    )
