"""Filter codec port - portable text form of a filter list."""

from collections.abc import Sequence
from typing import Protocol

from attrsearch.domain.value_objects import SearchFilter


class FilterCodec(Protocol):
    """Port for encoding and decoding saved filter sets."""

    def encode(self, filters: Sequence[SearchFilter]) -> str: ...

    def decode(self, encoded: str) -> list[SearchFilter]: ...
