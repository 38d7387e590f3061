"""Ukrainian language module."""
from .module import UkrainianModule
from .engine import Declensioner, decline, get_declensioner
from .errors import UnsupportedWordError
from .groups import DeclensionGroup, NounSubgroup
from .phrase import PhraseShape, classify_phrase

__all__ = [
    "UkrainianModule",
    "Declensioner",
    "decline",
    "get_declensioner",
    "UnsupportedWordError",
    "DeclensionGroup",
    "NounSubgroup",
    "PhraseShape",
    "classify_phrase",
]
