from __future__ import annotations

from dataclasses import dataclass

from grid_designer.location import QUERY_KEY


@dataclass(frozen=True)
class DesignerConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    query_key: str = QUERY_KEY  # query parameter holding a shared grid system
    log_level: str = "WARNING"
    debug: bool = False
