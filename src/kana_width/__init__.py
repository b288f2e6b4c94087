"""Japanese character-width and kana script normalization."""

from .builder import build_normalizer, get_normalizer, normalize_text
from .engine import Normalizer
from .options import BuildOptions, Directive, Modifier

__all__ = [
    "Directive",
    "Modifier",
    "BuildOptions",
    "Normalizer",
    "build_normalizer",
    "get_normalizer",
    "normalize_text",
]
