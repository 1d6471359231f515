"""The grid system a new session starts from."""

from __future__ import annotations

from typing import Any


def _demo(heading1_end: int, heading2_end: int, paragraph_end: int) -> dict[str, Any]:
    return {
        "heading1": {"start": 1, "end": heading1_end},
        "heading2": {"start": 1, "end": heading2_end},
        "paragraph": {"start": 1, "end": paragraph_end},
    }


# Id-less snapshot; ids are minted whenever it is turned into a GridSystem.
DEFAULT_SNAPSHOT: dict[str, Any] = {
    "preferences": [
        {
            "breakpointRange": {"minWidth": 0, "maxWidth": 719},
            "columns": 4,
            "gutter": 16,
            "margin": 16,
            "scale": 1,
            "demo": _demo(5, 5, 5),
        },
        {
            "breakpointRange": {"minWidth": 720, "maxWidth": 1023},
            "contentMaxWidth": 720,
            "columns": 8,
            "gutter": 16,
            "margin": 16,
            "scale": 1,
            "demo": _demo(9, 9, 8),
        },
        {
            "breakpointRange": {"minWidth": 1024, "maxWidth": 1279},
            "contentMaxWidth": 1024,
            "columns": 12,
            "gutter": 32,
            "margin": 16,
            "scale": 1,
            "demo": _demo(13, 13, 9),
        },
        {
            "breakpointRange": {"minWidth": 1280, "maxWidth": 1599},
            "contentMaxWidth": 1280,
            "columns": 12,
            "gutter": 32,
            "margin": 32,
            "scale": 1,
            "demo": _demo(13, 13, 7),
        },
        {
            "breakpointRange": {"minWidth": 1600},
            "contentMaxWidth": 1280,
            "columns": 12,
            "gutter": 32,
            "margin": 32,
            "scale": 1.25,
            "demo": _demo(13, 13, 7),
        },
    ]
}
