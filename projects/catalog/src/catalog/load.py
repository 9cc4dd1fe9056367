"""Module for loading action catalogs from files and URLs."""

from __future__ import annotations

import json
import tomllib
from datetime import date
from hashlib import sha256
from logging import getLogger
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from requests import get

from catalog.catalog import ActionCatalog, CatalogError

logger = getLogger(__name__)

CATALOG_SUFFIXES = {".json", ".toml"}


def verify_checksum(data: bytes, checksum: str, location: str = "catalog") -> None:
    """Check catalog content against a "sha256:<hex>" digest.

    Raises:
        CatalogError: If the digest is not sha256 or does not match

    """
    algorithm, _, expected = checksum.partition(":")
    if algorithm.lower() != "sha256" or not expected:
        msg = f"Unsupported checksum format {checksum!r}, expected sha256:<hex>"
        raise CatalogError(msg)

    actual = sha256(data).hexdigest()
    if expected.lower() != actual:
        msg = f"Checksum verification failed for {location}: got sha256:{actual}"
        raise CatalogError(msg)


def download_catalog(url: str) -> bytes:
    """Download a catalog file."""
    response = get(url, timeout=30, allow_redirects=True)
    response.raise_for_status()
    return response.content


def parse_catalog(data: bytes, suffix: str) -> dict[str, Any]:
    """Parse raw catalog content as JSON or TOML."""
    try:
        if suffix == ".toml":
            return tomllib.loads(data.decode())
        if suffix == ".json":
            parsed = json.loads(data)
            if not isinstance(parsed, dict):
                msg = "Catalog must be a JSON object"
                raise CatalogError(msg)
            return parsed
    except (UnicodeDecodeError, tomllib.TOMLDecodeError, json.JSONDecodeError) as err:
        msg = f"Malformed catalog: {err}"
        raise CatalogError(msg) from err
    msg = f"Unsupported catalog format: {suffix or 'no extension'}"
    raise CatalogError(msg)


def catalog_from_data(data: dict[str, Any]) -> ActionCatalog:
    """Build a catalog from parsed content.

    Expected layout, shown as TOML::

        version = "1.0.0"
        updated_at = 2026-01-01

        [services.s3]
        GetObject = "Read"
        PutObject = "Write"
    """
    services = data.get("services")
    if not isinstance(services, dict) or not all(
        isinstance(actions, dict) for actions in services.values()
    ):
        msg = "Catalog must contain a 'services' table of service -> action -> level"
        raise CatalogError(msg)

    updated_at = data.get("updated_at")
    if isinstance(updated_at, date):
        updated_at = updated_at.isoformat()

    return ActionCatalog(
        services,
        version=data.get("version"),
        updated_at=updated_at,
    )


def load_catalog(source: str | Path, *, checksum: str | None = None) -> ActionCatalog:
    """Load a catalog from a local file or an http(s) URL.

    Args:
        source: Path or URL of a .json or .toml catalog
        checksum: Optional "sha256:<hex>" digest the content must match

    Returns:
        The loaded catalog

    Raises:
        CatalogError: If the content is malformed or fails the checksum
        requests.RequestException: If the download fails

    """
    location = str(source)
    if urlparse(location).scheme in {"http", "https"}:
        data = download_catalog(location)
        suffix = Path(urlparse(location).path).suffix.lower()
    else:
        path = Path(location)
        try:
            data = path.read_bytes()
        except OSError as err:
            msg = f"Cannot read catalog {path}: {err}"
            raise CatalogError(msg) from err
        suffix = path.suffix.lower()

    if checksum is not None:
        verify_checksum(data, checksum, location)

    catalog = catalog_from_data(parse_catalog(data, suffix))
    logger.debug("Loaded %d actions from %s", len(catalog), location)
    return catalog
