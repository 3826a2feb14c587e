"""Load binding sheets from text, files, or streams."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Union

from bindsheet.config import BindsheetConfig
from bindsheet.model.sheet import BindingSheet
from bindsheet.parser.transformer import parse_sheet

__all__ = ["load", "loads"]

log = logging.getLogger("bindsheet")

Source = Union[str, "os.PathLike[str]", IO[str], IO[bytes]]


def loads(text: str) -> BindingSheet:
    """Parse binding sheet text.

    Raises MalformedSheetError (or a more specific BindsheetError) on any
    grammar or analysis failure; there is no partial result.
    """
    rules = parse_sheet(text)
    log.debug("Loaded binding sheet with %d rule(s)", len(rules))
    return BindingSheet(rules=rules)


def load(source: Source, config: BindsheetConfig | None = None) -> BindingSheet:
    """Load a binding sheet from a path or an open text/binary stream."""
    config = config or BindsheetConfig()
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        log.debug("Reading binding sheet from %s", path)
        return loads(path.read_text(encoding=config.encoding))

    content = source.read()
    if isinstance(content, bytes):
        content = content.decode(config.encoding)
    return loads(content)
