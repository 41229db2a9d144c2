"""Core conversion API for datelayout."""

from __future__ import annotations

from datelayout.core.converter import convert
from datelayout.core.options import NATIVE_DATE, ConvertOptions, Layout, NativeDate

__all__: list[str] = [
    "convert",
    "ConvertOptions",
    "Layout",
    "NATIVE_DATE",
    "NativeDate",
]
