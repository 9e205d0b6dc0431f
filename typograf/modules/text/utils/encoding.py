from __future__ import annotations

import codecs
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def resolve_encoding(charset: Optional[str]) -> str:
    """Map an IANA charset name to a Python codec name, defaulting to UTF-8."""
    if not charset:
        return DEFAULT_ENCODING
    name = charset.strip().strip('"').strip("'")
    try:
        info = codecs.lookup(name)
    except LookupError:
        logger.warning("Unknown response charset %r, decoding as %s", charset, DEFAULT_ENCODING)
        return DEFAULT_ENCODING
    # hex, base64, rot13 and the like are bytes-to-bytes or str-to-str codecs
    if not getattr(info, "_is_text_encoding", True):
        logger.warning("Charset %r is not a text encoding, decoding as %s", charset, DEFAULT_ENCODING)
        return DEFAULT_ENCODING
    return info.name


def decode_body(data: bytes, encoding: str) -> Optional[str]:
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        return None
