"""Internal utilities for datelayout.

This module contains private implementation details:
    - Month tables and template symbols
    - Permissive numeric coercion
    - Custom decorators (@memoize)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datelayout._internal.coerce import NAN, is_nan, to_number
from datelayout._internal.decorators import memoize

__all__: list[str] = [
    "NAN",
    "is_nan",
    "memoize",
    "to_number",
]
