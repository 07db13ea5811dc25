"""Domain ports: interfaces implemented by outer layers."""

from criteria.domain.ports.catalog import CatalogPort
from criteria.domain.ports.reporter import ReporterProtocol

__all__ = [
    "CatalogPort",
    "ReporterProtocol",
]
