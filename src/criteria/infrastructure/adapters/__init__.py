"""Infrastructure adapters for external interfaces."""

from criteria.infrastructure.adapters.json_catalog import JsonCatalog

__all__ = ["JsonCatalog"]
