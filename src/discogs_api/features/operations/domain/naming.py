"""Summary: camelCase and snake_case conversion for parameter names.
Why: Callers use camelCase names while the catalog declares snake_case ones.
"""

from __future__ import annotations

import re
from typing import Final

_LOWER_UPPER_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"([a-z])([A-Z])")


def camel_to_snake(name: str) -> str:
    """Insert ``_`` at each lowercase-to-uppercase transition and lowercase.

    Runs of capitals only split once at their first boundary, so
    ``getHTMLParser`` becomes ``get_htmlparser``. Digits never start a
    boundary: ``test2Case`` becomes ``test2case``.
    """

    if not any(char.isupper() for char in name):
        return name
    return _LOWER_UPPER_BOUNDARY.sub(r"\1_\2", name).lower()


def snake_to_camel(name: str) -> str:
    """Uppercase the letter after each ``_`` and drop the underscores."""

    if "_" not in name:
        return name
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


__all__ = ["camel_to_snake", "snake_to_camel"]
