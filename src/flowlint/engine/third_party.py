"""Class names owned by third-party libraries, excluded before rules run."""

from __future__ import annotations

import re
from typing import Iterable

THIRD_PARTY_LIBRARIES: dict[str, re.Pattern[str]] = {
    "swiper": re.compile(r"^swiper(?:$|-)"),
    "splide": re.compile(r"^splide(?:$|__|-)"),
    "finsweet": re.compile(r"^fs-"),
    "webflow": re.compile(r"^w-"),
}


def library_for(class_name: str) -> str | None:
    """Library id owning ``class_name``, or None."""
    for library, pattern in THIRD_PARTY_LIBRARIES.items():
        if pattern.match(class_name):
            return library
    return None


def is_third_party(class_name: str) -> bool:
    return library_for(class_name) is not None


def split_third_party(names: Iterable[str]) -> tuple[list[str], list[str]]:
    """Partition ``names`` into (kept, ignored), preserving order."""
    kept: list[str] = []
    ignored: list[str] = []
    for name in names:
        (ignored if is_third_party(name) else kept).append(name)
    return kept, ignored
