"""JSON catalog adapter.

Implements CatalogPort over a UTF-8 JSON file holding an array of
{"name", "color", "size", "weight"} objects. weight is optional on load.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING

from criteria.domain.exceptions import CatalogError
from criteria.domain.model.product import Product

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class JsonCatalog:
    """Product catalog stored as a JSON array.

    FAIL-FIRST: raises CatalogError on any read, decode or schema issue.
    No partial results.
    """

    def __init__(self, path: Path, *, indent: int | None = 2) -> None:
        """Initialize catalog.

        Args:
            path: Catalog file path
            indent: JSON indentation used by save(). None for compact.

        Raises:
            TypeError: If path is None
        """
        if path is None:
            raise TypeError("path must not be None")
        self._path = path
        self._indent = indent

    @property
    def path(self) -> Path:
        """Catalog file path."""
        return self._path

    def load(self) -> tuple[Product, ...]:
        """Read all products in file order.

        Returns:
            Products in the order stored

        Raises:
            CatalogError: If file is missing, unreadable or malformed
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise CatalogError(self._path, "file not found") from e
        except PermissionError as e:
            raise CatalogError(self._path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise CatalogError(self._path, f"encoding error: {e}") from e
        except OSError as e:
            raise CatalogError(self._path, f"cannot read: {e.strerror or e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogError(self._path, f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise CatalogError(self._path, f"expected JSON array, got {type(data).__name__}")

        products: list[Product] = []
        for index, raw in enumerate(data):
            if not isinstance(raw, Mapping):
                raise CatalogError(
                    self._path, f"entry {index}: expected object, got {type(raw).__name__}"
                )
            try:
                products.append(Product.from_mapping(raw))
            except (TypeError, ValueError) as e:
                raise CatalogError(self._path, f"entry {index}: {e}") from e
        return tuple(products)

    def save(self, products: Iterable[Product]) -> None:
        """Write products, replacing existing file contents.

        Args:
            products: Products to store, in order

        Raises:
            CatalogError: If file cannot be written
        """
        data = [product.to_dict() for product in products]
        try:
            self._path.write_text(json.dumps(data, indent=self._indent) + "\n", encoding="utf-8")
        except FileNotFoundError as e:
            raise CatalogError(self._path, "parent directory not found") from e
        except PermissionError as e:
            raise CatalogError(self._path, "permission denied") from e
        except OSError as e:
            raise CatalogError(self._path, f"cannot write: {e.strerror or e}") from e
