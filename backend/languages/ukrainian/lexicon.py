"""Closed word lists for Ukrainian declension.

Every lexical exception the engine consults lives here, so precedence
between lists can be audited in one place. Keys are lower-case with the
ASCII apostrophe (see `words.normalize_apostrophe`).

Tables are frozen: frozensets for membership, MappingProxyType for maps.
"""
from types import MappingProxyType

from languages.types import GrammaticalCase as Case

# =============================================================================
# Gender
# =============================================================================

# Masculine nouns and names ending in -о/-а/-я
MASCULINE_WORDS = frozenset({
    "тато", "батько", "дідо", "дядько", "петро", "микола", "михайло",
    "павло", "дмитро", "данило", "гаврило", "марко", "левко", "сава",
    "кузьма", "лука", "хома", "ілля", "никита", "старшина", "суддя",
})

FEMININE_WORDS = frozenset({
    "мати", "ніч", "осінь", "сіль", "любов", "тінь", "піч", "річ",
    "кров", "подорож", "розкіш", "мідь", "сталь", "радість",
})

NEUTER_WORDS = frozenset({
    "життя", "щастя", "ягня", "кошеня", "теля", "ім'я", "плем'я",
    "тім'я", "вим'я", "курча", "лоша", "дівча", "порося", "каченя",
    "гусеня", "козеня", "вовченя", "звіря", "хлоп'я", "знання",
    "питання", "завдання", "відділення", "управління", "командування",
    "подвір'я", "волосся", "листя", "весілля", "зілля", "обличчя",
})

# =============================================================================
# Declension group identification
# =============================================================================

# Feminine surnames that keep one form in every case
INDECLINABLE_FEMININE_SURNAMES = frozenset({"голуб", "боровик", "присяжнюк"})

# Feminine endings that never decline (Шевченко, Франко, Коваленко)
INDECLINABLE_FEMININE_ENDINGS = ("о",)

# Consonant endings that mark a capitalized feminine token as a surname
FEMININE_SURNAME_CONSONANT_ENDINGS = (
    "юк", "ук", "як", "ик", "ич", "ець", "ок", "ар", "ів", "їв", "уб", "ун",
)

# Feminine words of the third declension that do not end in a consonant
THIRD_DECLENSION_VOWEL_WORDS = frozenset({"мати"})

# =============================================================================
# Stems
# =============================================================================

# Vowel alternation і → о/е in oblique forms of masculine nouns
STEM_ALTERNATIONS = MappingProxyType({
    "стіл": "стол",
    "гість": "гост",
    "кінь": "кон",
    "віл": "вол",
    "кіт": "кот",
    "ніс": "нос",
    "сокіл": "сокол",
    "попіл": "попел",
    "вечір": "вечор",
    "федір": "федор",
    "ніж": "нож",
    "день": "дн",
    "вогонь": "вогн",
    "швець": "шевц",
    "боєць": "бійц",
    "жнець": "женц",
    "тиждень": "тижн",
    "камінь": "камен",
    "корінь": "корен",
    "ремінь": "ремен",
})

# -ок nouns without a fleeting -о- (урок → урока)
STABLE_OK_NOUNS = frozenset({"урок", "строк", "пророк", "порок", "знаток"})

# Masculine nouns in -р that decline soft (лікар → лікаря)
SOFT_R_NOUNS = frozenset({
    "кухар", "ігор", "лікар", "секретар", "воротар", "пекар", "писар",
    "вівчар", "кобзар", "бунтар", "лихвар", "друкар", "пісняр", "косар",
})

# Masculine -ов/-ев words that are ordinary nouns, not surnames
OV_COMMON_WORDS = frozenset({
    "любов", "основ", "морков", "здоров", "кров", "покров", "улов",
    "засов", "лев", "рев", "спів", "азов", "яків", "київ", "львів",
    "харків", "чернігів", "острів",
})

# =============================================================================
# Plural overrides
# =============================================================================

# Genitive plural forms with an inserted vowel or other irregularity
GENITIVE_PLURAL_OVERRIDES = MappingProxyType({
    "життя": "життів",
    "земля": "земель",
    "сестра": "сестер",
    "пісня": "пісень",
    "вишня": "вишень",
    "казка": "казок",
    "книжка": "книжок",
    "ручка": "ручок",
    "сорочка": "сорочок",
    "вікно": "вікон",
    "відро": "відер",
    "весло": "весел",
    "ребро": "ребер",
    "число": "чисел",
    "ліжко": "ліжок",
    "село": "сіл",
    "слово": "слів",
    "озеро": "озер",
    "море": "морів",
    "поле": "полів",
    "серце": "сердець",
    "сонце": "сонць",
    "яйце": "яєць",
    "кінь": "коней",
    "гість": "гостей",
    "сім'я": "сімей",
    "стаття": "статей",
})

# =============================================================================
# Vocative overrides
# =============================================================================

VOCATIVE_OVERRIDES = MappingProxyType({
    "тато": "тату",
    "дідо": "діду",
    "ігор": "ігоре",
    "син": "сину",
    "бог": "боже",
    "друг": "друже",
    "козак": "козаче",
    "чоловік": "чоловіче",
})

# Soft feminine names whose vocative ends in -ю (Галю, Олю)
SOFT_VOCATIVE_NAMES = frozenset({
    "галя", "оля", "катя", "валя", "таня", "ганя", "маня", "соня",
    "люся", "ася", "надя", "юля", "ліля", "поля", "настя", "віря",
})

# =============================================================================
# Third declension irregulars
# =============================================================================

# Oblique stems with і → о/е alternation (ніч → ночі)
THIRD_DECLENSION_OBLIQUE_STEMS = MappingProxyType({
    "ніч": "ноч",
    "піч": "печ",
    "річ": "реч",
    "сіль": "сол",
    "осінь": "осен",
})

MATI_SINGULAR = MappingProxyType({
    Case.NOMINATIVE: "мати",
    Case.GENITIVE: "матері",
    Case.DATIVE: "матері",
    Case.ACCUSATIVE: "матір",
    Case.INSTRUMENTAL: "матір'ю",
    Case.LOCATIVE: "матері",
    Case.VOCATIVE: "мати",
})

MATI_PLURAL = MappingProxyType({
    Case.NOMINATIVE: "матері",
    Case.GENITIVE: "матерів",
    Case.DATIVE: "матерям",
    Case.ACCUSATIVE: "матерів",
    Case.INSTRUMENTAL: "матерями",
    Case.LOCATIVE: "матерях",
    Case.VOCATIVE: "матері",
})

# =============================================================================
# Fourth declension
# =============================================================================

# Nouns taking the -ен- infix (ім'я → імені)
EN_INFIX_NOUNS = frozenset({"ім'я", "плем'я", "тім'я", "вим'я"})

# Baby-animal nouns taking the -ят-/-ат- infix (теля → теляти)
YAT_INFIX_NOUNS = frozenset({
    "теля", "ягня", "кошеня", "курча", "лоша", "дівча", "порося",
    "каченя", "гусеня", "козеня", "вовченя", "звіря", "хлоп'я",
    "цуценя", "оленя", "лисеня", "ведмежа", "голуб'я", "немовля",
})

# Abstract -я nouns whose genitive equals the nominative
ABSTRACT_YA_NOUNS = frozenset({
    "життя", "знання", "читання", "писання", "розуміння", "навчання",
    "кохання", "страждання", "бажання", "мислення", "щастя", "листя",
    "подвір'я", "волосся", "весілля", "зілля", "обличчя",
})

# =============================================================================
# Animacy
# =============================================================================

ANIMATE_NOUNS = frozenset({
    "батько", "тато", "дідо", "дядько", "син", "брат", "чоловік", "друг",
    "мати", "бог", "козак", "кінь", "вовк", "пес", "кіт", "птах",
    "лікар", "кухар", "секретар", "воротар", "пекар", "писар", "учитель",
    "студент", "учень", "водій", "механік", "оператор", "фельдшер",
    "стрілець", "гранатометник", "кулеметник", "снайпер", "командир",
    "заступник", "начальник", "черговий", "військовослужбовець",
})

# =============================================================================
# Military ranks
# =============================================================================

# Each entry: (characters cut from the nominative, endings per oblique case).
# Ranks decline as masculine and take -у in the locative.
_HARD_RANK = (0, MappingProxyType({
    Case.GENITIVE: "а",
    Case.DATIVE: "у",
    Case.ACCUSATIVE: "а",
    Case.INSTRUMENTAL: "ом",
    Case.LOCATIVE: "у",
    Case.VOCATIVE: "е",
}))

_VELAR_RANK = (0, MappingProxyType({
    Case.GENITIVE: "а",
    Case.DATIVE: "у",
    Case.ACCUSATIVE: "а",
    Case.INSTRUMENTAL: "ом",
    Case.LOCATIVE: "у",
    Case.VOCATIVE: "у",
}))

_A_RANK = (1, MappingProxyType({
    Case.GENITIVE: "и",
    Case.DATIVE: "і",
    Case.ACCUSATIVE: "у",
    Case.INSTRUMENTAL: "ою",
    Case.LOCATIVE: "і",
    Case.VOCATIVE: "о",
}))

MILITARY_RANKS = MappingProxyType({
    "солдат": _HARD_RANK,
    "матрос": _HARD_RANK,
    "курсант": _HARD_RANK,
    "сержант": _HARD_RANK,
    "старшина": _A_RANK,
    "прапорщик": _VELAR_RANK,
    "мічман": _HARD_RANK,
    "лейтенант": _HARD_RANK,
    "капітан": _HARD_RANK,
    "майор": _HARD_RANK,
    "підполковник": _VELAR_RANK,
    "полковник": _VELAR_RANK,
    "генерал": _HARD_RANK,
    "адмірал": _HARD_RANK,
})

# Prefixes that combine with a rank through a hyphen or a space
RANK_PREFIXES = frozenset({"штаб", "майстер", "генерал", "контр", "віце"})

# Single-word ranks that open a "rank + full name" phrase
SINGLE_WORD_RANKS = frozenset({
    "солдат", "матрос", "рядовий", "сержант", "старшина", "прапорщик",
    "лейтенант", "капітан", "майор", "підполковник", "полковник",
    "генерал", "курсант", "мічман",
})

TWO_WORD_RANKS = frozenset({
    ("старший", "лейтенант"),
    ("молодший", "лейтенант"),
    ("старший", "сержант"),
    ("молодший", "сержант"),
    ("головний", "сержант"),
    ("штаб", "сержант"),
    ("майстер", "сержант"),
    ("головний", "старшина"),
    ("старший", "солдат"),
    ("старший", "матрос"),
    ("старший", "прапорщик"),
    ("бригадний", "генерал"),
})

# =============================================================================
# Positions and phrase structure
# =============================================================================

POSITION_TITLES = frozenset({
    "командир", "заступник", "начальник", "головний", "оперативний",
    "черговий", "фельдшер", "кухар", "оператор", "водій", "механік",
    "стрілець", "гранатометник", "кулеметник", "снайпер", "помічник",
    "інструктор", "навідник", "розвідник", "сапер", "зв'язківець",
})

# Leading modifiers of a position or rank (старший оператор)
POSITION_MODIFIERS = frozenset({"старший", "молодший", "головний", "провідний"})

# Nouns that can stand second in a position description
POSITION_NOUNS = frozenset({
    "черговий", "оператор", "механік", "водій", "стрілець",
    "гранатометник", "кулеметник", "снайпер", "інструктор", "навідник",
    "розвідник", "сапер", "командир", "помічник",
})

# Unit words that mark free-text assignment descriptions
UNIT_WORDS_PATTERN = r"(?<!\w)(?:військової частини|роти|взводу|батареї|дивізіону|батальйону|бригади|відділення)(?!\w)"

# Words after one of these already stand in the case the preposition governs
PREPOSITIONS = frozenset({
    "в", "у", "з", "із", "зі", "на", "до", "від", "при", "під", "над",
    "за", "про", "для", "без", "через", "після", "перед", "біля", "щодо",
    "проти", "серед", "крім", "навколо", "протягом", "замість",
})

CONJUNCTIONS = frozenset({"та", "і", "й", "або"})

MASCULINE_PATRONYMIC_ENDINGS = ("ович", "евич")
FEMININE_PATRONYMIC_ENDINGS = ("івна", "ївна", "овна", "евна")
PATRONYMIC_ENDINGS = MASCULINE_PATRONYMIC_ENDINGS + FEMININE_PATRONYMIC_ENDINGS

# =============================================================================
# Adjectives
# =============================================================================

# Adjective endings recognised in any letter case
ADJECTIVE_ENDINGS = (
    "ий", "ська", "цька", "зька", "ське", "цьке", "ські", "цькі",
)

# Feminine, neuter and plural forms of common title adjectives
KNOWN_ADJECTIVES = frozenset({
    "старша", "молодша", "головна", "оперативна", "чергова", "провідна",
    "старше", "молодше", "головне", "оперативне", "чергове",
    "старші", "молодші", "головні", "оперативні", "чергові",
    "військова", "військове", "військові", "окрема", "окреме", "окремі",
    "медична", "медичне", "медичні", "механізована", "механізоване",
    "механізовані",
})

# Surname endings of adjectival origin
ADJECTIVAL_SURNAME_ENDINGS = ("ський", "цький", "зький", "ська", "цька", "зька")
