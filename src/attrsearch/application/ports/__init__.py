"""Application ports - interfaces for external adapters."""

from attrsearch.application.ports.access_checker import AccessChecker
from attrsearch.application.ports.filter_codec import FilterCodec
from attrsearch.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AccessChecker",
    "FilterCodec",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
