"""Database identifier normalization."""

import re

_NON_HEX = re.compile(r"[^a-fA-F0-9]")


def normalize_table_id(raw: str) -> str:
    """Return ``raw`` as 8-4-4-4-12 dashed hex, or unchanged if it is not 32 hex digits.

    Notion shares database ids in URLs without dashes; the API accepts both
    forms, but the dashed one is what it echoes back in ``parent``.
    """
    digits = _NON_HEX.sub("", raw)
    if len(digits) != 32:
        return raw
    return f"{digits[:8]}-{digits[8:12]}-{digits[12:16]}-{digits[16:20]}-{digits[20:]}"
