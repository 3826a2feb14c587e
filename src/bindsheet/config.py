from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BindsheetConfig:
    encoding: str = "utf-8"
    include_descendants: bool = True
    log_level: str = "WARNING"
    pretty_print: bool = True  # HTML output from `bindsheet apply`
