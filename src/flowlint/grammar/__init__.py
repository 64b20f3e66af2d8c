"""Grammar adapters and class-name normalization."""

from flowlint.grammar.base import GrammarAdapter
from flowlint.grammar.client_first import CLIENT_FIRST_GRAMMAR
from flowlint.grammar.lumos import LUMOS_GRAMMAR
from flowlint.grammar.normalize import (
    normalize_utility_class,
    normalize_variant_class,
    to_hyphen_format,
    to_underscore_format,
)

__all__ = [
    "GrammarAdapter",
    "LUMOS_GRAMMAR",
    "CLIENT_FIRST_GRAMMAR",
    "normalize_utility_class",
    "normalize_variant_class",
    "to_hyphen_format",
    "to_underscore_format",
]
