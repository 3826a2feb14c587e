"""Loads the Lark grammar shared by the sheet, rule and literal parsers."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

START_SYMBOLS = ["sheet", "rule", "setting", "list_literal"]

# Terminals that can only be expected while inside a ``name: value;`` setting.
SETTING_TERMINALS = frozenset({"NAME", "COLON", "VALUE", "SEMICOLON"})


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        start=START_SYMBOLS,
    )
