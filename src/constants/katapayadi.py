"""
Katapayadi numeral cipher tables and Roman -> Devanagari phonetic map.
"""

from types import MappingProxyType

VIRAMA = "्"  # ्
ANUSVARA = "ं"  # ं

# Vocalic R matras; the consonant + matra pair is ambiguous in the cipher
AMBIGUOUS_MATRAS = frozenset({"ृ", "ॄ"})  # ृ ॄ
AMBIGUOUS_MATRA_VALUE = 2

# Consonant -> digit (ka-ṭa-pa-yādi)
KATAPAYADI_VALUES = MappingProxyType(
    {
        "क": 1, "ख": 2, "ग": 3, "घ": 4, "ङ": 5, "च": 6, "छ": 7, "ज": 8, "झ": 9, "ञ": 0,
        "ट": 1, "ठ": 2, "ड": 3, "ढ": 4, "ण": 5, "त": 6, "थ": 7, "द": 8, "ध": 9, "न": 0,
        "प": 1, "फ": 2, "ब": 3, "भ": 4, "म": 5,
        "य": 1, "र": 2, "ल": 3, "व": 4, "श": 5, "ष": 6, "स": 7, "ह": 8,
        "क्ष": 6, "ज्ञ": 0,
    }
)  # fmt: skip

# Conjuncts read as a single atomic token
ATOMIC_CONJUNCTS: tuple[str, ...] = ("क्ष", "ज्ञ")

INDEPENDENT_VOWELS = frozenset(
    {"अ", "आ", "इ", "ई", "उ", "ऊ", "ए", "ऐ", "ओ", "औ", "अं", "अः", "ऋ", "ॠ", "ऌ", "ॡ"}
)

# Modern and loan words with a fixed spelling
LOANWORD_DICTIONARY = MappingProxyType(
    {
        "microsoft": "माइक्रोसॉफ्ट्",
        "congress": "काँग्रेस",
        "bjp": "भाजपा",
        "inc": "इंडियन नेशनल काँग्रेस",
        "general electric": "जेनेरल् एलेकट्रिक्",
    }
)

# Roman (IAST or loose English) -> Devanagari. Empty string for the
# inherent vowel "a".
PHONETIC_MAP = MappingProxyType(
    {
        # IAST vowels
        "ā": "ा", "ī": "ी", "ū": "ू", "ṛ": "ृ", "ṝ": "ॄ", "ḷ": "ॢ", "ḹ": "ॣ",
        "ai": "ै", "au": "ौ", "ṃ": "ं", "ḥ": "ः",
        # IAST consonants
        "ṭh": "ठ", "ḍh": "ढ",
        "ṭ": "ट", "ḍ": "ड", "ṇ": "ण", "ṣ": "ष", "ś": "श", "ñ": "ञ", "ṅ": "ङ",
        # loose English
        "aa": "ा", "ee": "ी", "oo": "ू",
        "ksh": "क्ष", "tra": "त्र", "gy": "ज्ञ", "jny": "ज्ञ", "ng": "ं",
        "sh": "श", "ch": "च",
        # standard consonants
        "th": "थ", "ph": "फ", "gh": "घ", "jh": "झ", "dh": "ध", "bh": "भ", "kh": "ख",
        "k": "क", "g": "ग", "j": "ज", "t": "त", "d": "द", "n": "न", "p": "प",
        "f": "फ", "b": "ब", "m": "म",
        "y": "य", "r": "र", "l": "ल", "v": "व", "w": "व", "s": "स", "h": "ह",
        # single characters and short vowels
        "c": "च",
        "a": "", "i": "ि", "u": "ु", "e": "े", "o": "ो",
    }
)  # fmt: skip

# Longest keys first so "ṭh" wins over "ṭ" and "sh" over "s"
PHONETIC_KEYS: tuple[str, ...] = tuple(
    sorted(PHONETIC_MAP, key=len, reverse=True)
)
MAX_PHONETIC_KEY = len(PHONETIC_KEYS[0])

# Roman clusters the heuristic cannot resolve reliably
AMBIGUOUS_CLUSTERS = r"ng|ksh|jny"
