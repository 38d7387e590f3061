"""Orthographic helpers shared by the declension rules."""
import re

from .lexicon import STABLE_OK_NOUNS, STEM_ALTERNATIONS

VOWELS = frozenset("аеєиіїоуюя")
SIBILANTS = frozenset("жчшщ")
APOSTROPHES = ("ʼ", "’", "`")

_PALATALIZATION = {"г": "з", "к": "ц", "х": "с"}
_AFFIXES = re.compile(r"^([\"'«(\[]*)(.*?)([\"'»)\].,;:!?]*)$", re.DOTALL)


def normalize_apostrophe(word: str) -> str:
    """Replace typographic apostrophes with the ASCII one."""
    for mark in APOSTROPHES:
        word = word.replace(mark, "'")
    return word


def key(word: str) -> str:
    """Lexicon lookup key: lower case, ASCII apostrophe."""
    return normalize_apostrophe(word).lower()


def is_uppercase(word: str) -> bool:
    letters = [c for c in word if c.isalpha()]
    return len(letters) > 1 and all(c.isupper() for c in letters)


def is_title_case(word: str) -> bool:
    letters = [c for c in word if c.isalpha()]
    if not letters or not letters[0].isupper():
        return False
    return all(c.islower() for c in letters[1:])


def is_capitalized(word: str) -> bool:
    """Upper-case or title-case token, the shape of a proper name."""
    return is_uppercase(word) or is_title_case(word)


def copy_letter_case(source: str, target: str) -> str:
    """Apply the letter-case pattern of `source` to `target`."""
    if is_uppercase(source):
        return target.upper()
    if source.islower():
        return target.lower()
    if is_title_case(source):
        return target[:1].upper() + target[1:].lower()
    return target


def is_vowel(char: str) -> bool:
    return char in VOWELS


def is_iotated(stem: str) -> bool:
    """Stem ends in a vowel or apostrophe, so soft endings spell with є/ї/й."""
    return not stem or stem[-1] in VOWELS or stem[-1] == "'"


def palatalize(stem: str) -> str:
    """Replace a final velar with its sibilant: г→з, к→ц, х→с."""
    if stem and stem[-1] in _PALATALIZATION:
        return stem[:-1] + _PALATALIZATION[stem[-1]]
    return stem


def get_stem(word: str) -> str:
    """Oblique stem of a masculine consonant-final noun.

    Applies lexical alternations (стіл → стол), the fleeting vowel of
    -ець and -ок (горобець → горобц, будинок → будинк) and strips a
    final ь/й.
    """
    w = word.lower()
    if w in STEM_ALTERNATIONS:
        return STEM_ALTERNATIONS[w]
    if w.endswith("ець") and len(w) > 4 and not is_vowel(w[-4]):
        base = w[:-3]
        if base.endswith("л"):
            base += "ь"
        return base + "ц"
    if w.endswith("ок") and len(w) > 4 and not is_vowel(w[-3]) and w not in STABLE_OK_NOUNS:
        return w[:-2] + "к"
    if w.endswith(("ь", "й")):
        return w[:-1]
    return w


def split_affixes(token: str) -> tuple[str, str, str]:
    """Split leading/trailing punctuation off a token: `роти,` → ("", "роти", ",")."""
    match = _AFFIXES.match(token)
    return match.group(1), match.group(2), match.group(3)
