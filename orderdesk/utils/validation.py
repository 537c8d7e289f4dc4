"""
Validação e sanitização de entradas vindas da interface.
"""

from typing import Any
import re

MAX_SEARCH_QUERY_LENGTH = 100
VALID_THEMES = ("light", "dark")

_SCRIPT_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")
_UNSAFE_CHARS_RE = re.compile(r"[<>'\"&]")


def sanitize_string(value: Any) -> str:
    """
    Remove blocos <script>, tags HTML e os caracteres < > ' " &.
    Valores que não são string viram ''.
    """
    if not isinstance(value, str):
        return ""
    value = _SCRIPT_RE.sub("", value)
    value = _TAG_RE.sub("", value)
    value = _UNSAFE_CHARS_RE.sub("", value)
    return value.strip()


def validate_search_query(query: Any) -> str:
    """Sanitiza a busca e limita a 100 caracteres."""
    return sanitize_string(query)[:MAX_SEARCH_QUERY_LENGTH]


def validate_theme(theme: Any) -> str:
    return theme if theme in VALID_THEMES else "light"
