"""Third declension: feminine nouns in a consonant or -ь, plus мати."""
from languages.types import Gender, GrammaticalCase, GrammaticalNumber

from ..declension import ending
from ..lexicon import MATI_PLURAL, MATI_SINGULAR, THIRD_DECLENSION_OBLIQUE_STEMS
from ..words import SIBILANTS, is_vowel, key

Case = GrammaticalCase
Number = GrammaticalNumber

_LABIALS = frozenset("бпвмфр")
_DOUBLING = frozenset("лнтдсзц")


def oblique_stem(word: str) -> str:
    w = key(word)
    if w in THIRD_DECLENSION_OBLIQUE_STEMS:
        return THIRD_DECLENSION_OBLIQUE_STEMS[w]
    return w[:-1] if w.endswith("ь") else w


def instrumental(word: str) -> str:
    """Instrumental singular: радістю, сіллю, любов'ю, ніччю."""
    w = key(word)
    if w.endswith("ь"):
        body = w[:-1]
        last = body[-1:]
        if len(body) > 1 and not is_vowel(body[-2]):
            return body + "ю"
        if last in _DOUBLING:
            return body + last + "ю"
        return body + "ю"
    last = w[-1]
    if last in _LABIALS:
        return w + "'ю"
    if last == "щ":
        return w + "ю"
    if last in SIBILANTS:
        return w + last + "ю"
    if len(w) > 1 and not is_vowel(w[-2]):
        return w + "ю"
    return w + last + "ю"


def decline(
    word: str,
    case: GrammaticalCase,
    number: GrammaticalNumber,
    *,
    gender: Gender = Gender.FEMININE,
    animate: bool = False,
) -> str:
    w = key(word)
    if w == "мати":
        table = MATI_PLURAL if number is Number.PLURAL else MATI_SINGULAR
        return table[case]

    stem = oblique_stem(w)
    if number is Number.PLURAL:
        if case is Case.ACCUSATIVE:
            case = Case.GENITIVE if animate else Case.NOMINATIVE
        if case is Case.VOCATIVE:
            case = Case.NOMINATIVE
        suffix = ending("third", case, number)
        if stem[-1:] in SIBILANTS and suffix.startswith("я"):
            suffix = "а" + suffix[1:]
        return stem + suffix

    if case in (Case.NOMINATIVE, Case.ACCUSATIVE):
        return w
    if case is Case.INSTRUMENTAL:
        return instrumental(w)
    return stem + ending("third", case, number)
