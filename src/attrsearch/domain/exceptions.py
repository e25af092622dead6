"""Domain exceptions."""


class AttrSearchError(Exception):
    """Base exception for attrsearch."""

    pass


class ValidationError(AttrSearchError):
    """Validation failed for input data."""

    pass


class FilterDecodeError(ValidationError):
    """Stored filter set could not be decoded."""

    pass


class NotFound(AttrSearchError):
    """Requested resource was not found."""

    def __init__(self, kind: str, identifier: object) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} not found: {identifier}")


class PermissionDenied(AttrSearchError):
    """Caller is not allowed to perform the requested action."""

    pass


class CycleDetected(PermissionDenied):
    """Hierarchy edge would close a cycle."""

    pass


class Conflict(AttrSearchError):
    """Operation conflicts with existing state."""

    pass
