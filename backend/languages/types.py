"""Shared type definitions for language modules."""
from enum import Enum


class GrammaticalCase(str, Enum):
    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    INSTRUMENTAL = "instrumental"
    LOCATIVE = "locative"
    VOCATIVE = "vocative"


class GrammaticalNumber(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"
