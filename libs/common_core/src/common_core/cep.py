"""
common_core.cep - Brazilian postal code (CEP) validation.

A CEP is exactly 8 ASCII decimal digits. The orchestration service accepts
nothing else; the input gateway first strips the hyphen and space
characters users commonly type ("01001-000", "01001 000").
"""

from __future__ import annotations

import re
from typing import Any

_CEP_RE = re.compile(r"[0-9]{8}")

# Formatting characters the input gateway is allowed to remove
_CEP_FORMATTING_CHARS = ("-", " ")


def is_valid_cep(code: Any) -> bool:
    """Return True if *code* is exactly 8 ASCII digits, with nothing else."""
    if not isinstance(code, str):
        return False
    return _CEP_RE.fullmatch(code) is not None


def clean_cep(raw: str) -> str:
    """Remove hyphens and spaces from *raw*, leaving every other character untouched."""
    cleaned = raw
    for char in _CEP_FORMATTING_CHARS:
        cleaned = cleaned.replace(char, "")
    return cleaned
