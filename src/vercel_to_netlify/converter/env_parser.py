"""
Env Parser

Best-effort parsing of KEY=VALUE .env text.
"""

from typing import Dict, Iterable

QUOTE_CHARS = ('"', "'")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value


def parse_env(text: str) -> Dict[str, str]:
    """Parse .env text into a name -> value mapping.

    Blank lines, comment lines and lines without '=' are skipped. Only the
    first '=' separates name from value, and one matching pair of outer
    quotes is removed from the value. A repeated name keeps its last value.
    """
    variables: Dict[str, str] = {}

    for line in text.split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue

        variables[key] = _unquote(value.strip())

    return variables


def merge_env_sources(texts: Iterable[str]) -> Dict[str, str]:
    """Parse several .env texts in order; later sources win on collisions."""
    merged: Dict[str, str] = {}
    for text in texts:
        merged.update(parse_env(text))
    return merged
