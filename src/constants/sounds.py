"""
Phonetic reference tables for name selection.

Hoda Cakra syllable wheel, planetary sound groups (varga),
Avastha vowel pairs and Svara vowel wheel.
"""

from types import MappingProxyType

from .relationships import Planet

# Hoda Cakra: syllable -> 0-based sign index.
# Kept as the traditional ordered listing. Some syllables are listed
# under two signs ("ta", "na", "di", "tha"); building a dict from the
# pairs keeps each key at its first position with its last sign.
HODA_CAKRA_LISTING: tuple[tuple[str, int], ...] = (
    ("chu", 0), ("che", 0), ("cho", 0), ("la", 0), ("li", 0),
    ("lu", 1), ("le", 1), ("lo", 1), ("vi", 1), ("vu", 1), ("ve", 1), ("vo", 1),
    ("ka", 2), ("ki", 2), ("ku", 2), ("gh", 2), ("cha", 2), ("ke", 2), ("ko", 2),
    ("hi", 3), ("hu", 3), ("he", 3), ("ho", 3), ("da", 3), ("di", 3),
    ("ma", 4), ("mi", 4), ("mu", 4), ("me", 4), ("mo", 4), ("ta", 4),
    ("pa", 5), ("pi", 5), ("pu", 5), ("sha", 5), ("na", 5), ("tha", 5),
    ("ra", 6), ("ri", 6), ("ru", 6), ("re", 6), ("ro", 6), ("ta", 6),
    ("to", 7), ("na", 7), ("ni", 7), ("nu", 7), ("ne", 7), ("ya", 7), ("yi", 7),
    ("ye", 8), ("yo", 8), ("bha", 8), ("bhi", 8), ("bhu", 8), ("dha", 8),
    ("bho", 9), ("ja", 9), ("ji", 9), ("khi", 9), ("khu", 9), ("khe", 9),
    ("gu", 10), ("ge", 10), ("go", 10), ("sa", 10), ("si", 10), ("su", 10),
    ("di", 11), ("du", 11), ("tha", 11), ("jha", 11), ("de", 11), ("do", 11),
)  # fmt: skip

HODA_CAKRA = MappingProxyType(dict(HODA_CAKRA_LISTING))

# Hoda key selection per planet: (include prefix regex, exclude prefix regex)
HODA_KEY_RULES = MappingProxyType(
    {
        Planet.MARS: (r"^(k|g|ng)", None),  # Ka-varga
        Planet.VENUS: (r"^(c|ch|j|jh)", None),  # Ca-varga
        Planet.MERCURY: (r"^(t|d|n)", r"^(th|dh)"),  # Ta-varga, cerebral
        Planet.JUPITER: (r"^(t|d|n|th|dh)", None),  # Ta-varga, dental
        Planet.SATURN: (r"^(p|ph|b|bh|m)", None),  # Pa-varga
        Planet.MOON: (r"^(y|r|l|v|s|sh|h)", None),  # semivowels, sibilants
        Planet.RAHU: (r"^(p|b|m)", None),  # follows Saturn
        Planet.KETU: (r"^(k|g)", None),  # follows Mars
    }
)

# The Sun rules the vowels, which have no place on the consonant wheel
SUN_HODA_KEYS: tuple[str, ...] = ("a", "i", "u", "e", "o")

# Sound group (label, representative syllables) per planet
SOUND_GROUPS = MappingProxyType(
    {
        Planet.SUN: ("Vowels (Svara)", "a, ā, i, ī, u, ū, ṛ, ṝ, ḷ, e, ai, o, au"),
        Planet.MARS: ("Guttural (Ka-varga)", "ka, kha, ga, gha, ṅa"),
        Planet.VENUS: ("Palatal (Ca-varga)", "ca, cha, ja, jha, ña"),
        Planet.MERCURY: ("Cerebral (Ṭa-varga)", "ṭa, ṭha, ḍa, ḍha, ṇa"),
        Planet.JUPITER: ("Dental (Ta-varga)", "ta, tha, da, dha, na"),
        Planet.SATURN: ("Labial (Pa-varga)", "pa, pha, ba, bha, ma"),
        Planet.MOON: ("Semi-vowels & Sibilants", "ya, ra, la, va, śa, ṣa, sa, ha"),
        Planet.RAHU: ("Expansive/Foreign", "Reverse order of Saturn (approx)"),
        Planet.KETU: ("Contractive", "Reverse order of Mars (approx)"),
    }
)

# Baladi Avastha -> vowel pair that activates a planet in that state
AVASTHA_VOWELS = MappingProxyType(
    {
        "Bala": ("a", "ā"),
        "Kumara": ("i", "ī"),
        "Yuva": ("u", "ū"),
        "Vriddha": ("e", "ai"),
        "Mrita": ("o", "au"),
    }
)

# Progression of states across the five 6° bands of a sign
BALADI_ODD_SIGN: tuple[str, ...] = ("Bala", "Kumara", "Yuva", "Vriddha", "Mrita")
BALADI_EVEN_SIGN: tuple[str, ...] = tuple(reversed(BALADI_ODD_SIGN))

# Svara Cakra: vowel -> 0-based sign index. Only six signs are reached.
VOWEL_SIGNS = MappingProxyType(
    {
        "a": 0, "ā": 1,
        "i": 2, "ī": 2,
        "u": 3, "ū": 3,
        "e": 4, "ai": 4,
        "o": 5, "au": 5,
    }
)  # fmt: skip

# Panca Svara Dasa vowel groups, in cycle order
PANCA_SVARA_GROUPS: tuple[str, ...] = ("a", "i", "u", "e", "o")
DASA_YEARS = 12

# Vowel class used for first-vowel and syllable detection
VOWEL_CHARS = "aeiouāīūṛṝḷ"

# Lagana: sign nature -> 0-based signs it activates
LAGANA_NATURE_SIGNS = MappingProxyType(
    {
        "Fixed (Sthira)": (1, 4, 7, 10),
        "Movable (Cara)": (0, 3, 6, 9),
        "Dual (Dvisvabhava)": (2, 5, 8, 11),
    }
)
