"""Module for loading and querying action catalogs."""

from catalog.catalog import ActionCatalog, CatalogError
from catalog.load import (
    catalog_from_data,
    download_catalog,
    load_catalog,
    parse_catalog,
    verify_checksum,
)

__all__ = [
    "ActionCatalog",
    "CatalogError",
    "catalog_from_data",
    "download_catalog",
    "load_catalog",
    "parse_catalog",
    "verify_checksum",
]
