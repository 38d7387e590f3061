"""Language modules.

Provides factory/registry pattern for language-specific functionality.
"""
from .types import GrammaticalCase, GrammaticalNumber, Gender
from .base import LanguageModule, GrammarConfig
from .registry import get_module, register, list_languages

__all__ = [
    "get_module",
    "register",
    "list_languages",
    "LanguageModule",
    "GrammarConfig",
    "GrammaticalCase",
    "GrammaticalNumber",
    "Gender",
]
