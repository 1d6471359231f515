"""Shareable-link persistence: a grid system encoded in a URL query string.

Ids are stripped before encoding and re-minted on decode, so decoding the
same link twice yields equal content with distinct ids. A grid system equal
to the default is not written to the query string at all.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode

from grid_designer.errors import ValidationError
from grid_designer.model.defaults import DEFAULT_SNAPSHOT
from grid_designer.model.grid_system import GridSystem
from grid_designer.model.preferences import malformed_snapshot, new_id
from grid_designer.validation.diagnostic import Diagnostic, Severity

logger = logging.getLogger(__name__)

QUERY_KEY = "gridSystem"


def strip_ids(snapshot: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *snapshot* whose entries carry no ``id``."""
    return {
        **snapshot,
        "preferences": [
            {k: v for k, v in entry.items() if k != "id"}
            for entry in snapshot["preferences"]
        ],
    }


def mint_ids(snapshot: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *snapshot* with a fresh id on every entry."""
    return {
        **snapshot,
        "preferences": [{**entry, "id": new_id()} for entry in snapshot["preferences"]],
    }


def is_default(grid_system: GridSystem) -> bool:
    return strip_ids(grid_system.to_json()) == strip_ids(DEFAULT_SNAPSHOT)


def encode(grid_system: GridSystem) -> str:
    """Compact, id-less JSON for a shareable link."""
    return json.dumps(strip_ids(grid_system.to_json()), separators=(",", ":"), ensure_ascii=False)


def decode(raw: str) -> GridSystem:
    """Rebuild a grid system from :func:`encode` output, minting new ids."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError(
            [
                Diagnostic(
                    rule="check_snapshot",
                    severity=Severity.ERROR,
                    message=f"Grid system parameter is not valid JSON: {exc}",
                )
            ]
        ) from exc
    try:
        snapshot = mint_ids(data)
    except (KeyError, TypeError, AttributeError) as exc:
        raise malformed_snapshot(exc, "grid system") from exc
    return GridSystem.from_json(snapshot)


def parse_grid_system(query: str, key: str = QUERY_KEY) -> GridSystem | None:
    """Decode the grid system stored under *key*, or None when the key is absent."""
    for name, value in parse_qsl(query.lstrip("?")):
        if name == key and value:
            logger.debug("Decoding grid system from query parameter %r", key)
            return decode(value)
    return None


def update_query(query: str, grid_system: GridSystem, key: str = QUERY_KEY) -> str:
    """Return *query* with *grid_system* written under *key*.

    The key is removed when the grid system equals the default one; other
    parameters keep their order.
    """
    pairs = parse_qsl(query.lstrip("?"), keep_blank_values=True)
    if is_default(grid_system):
        return urlencode([(n, v) for n, v in pairs if n != key])

    encoded = encode(grid_system)
    updated: list[tuple[str, str]] = []
    written = False
    for name, value in pairs:
        if name != key:
            updated.append((name, value))
        elif not written:
            updated.append((key, encoded))
            written = True
    if not written:
        updated.append((key, encoded))
    return urlencode(updated)
