from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "typograf.resources"
DEFAULT_TABLE = "SOAP"

RESPONSE_PATTERN_KEY = "soap.response.processText.regex.text"


@lru_cache(maxsize=None)
def _read_table(table: str, locale: Optional[str]) -> Mapping[str, str]:
    root = resources.files(RESOURCE_PACKAGE)
    path = root / locale / f"{table}.json" if locale else root / f"{table}.json"
    if not path.is_file():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Resource table '{table}' must be a JSON object")
    return {str(key): str(value) for key, value in data.items()}


def load_string(key: str, *, table: str = DEFAULT_TABLE, locale: Optional[str] = None) -> str:
    """Look a string up in a packaged resource table.

    The localized table ``<locale>/<table>.json`` wins over the base table.
    Raises ``KeyError`` when neither defines the key.
    """
    if locale:
        localized = _read_table(table, locale)
        if key in localized:
            return localized[key]
        logger.debug("No '%s' in %s table for locale %s, using base table", key, table, locale)
    base = _read_table(table, None)
    if key not in base:
        raise KeyError(f"Resource '{key}' not found in table '{table}'")
    return base[key]


def response_pattern(locale: Optional[str] = None) -> str:
    return load_string(RESPONSE_PATTERN_KEY, locale=locale)
