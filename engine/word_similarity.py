"""Word-vs-word similarity verdict, tiered by word length.

Combines Double Metaphone codes, Jaro-Winkler score, the anagram guard,
number words and suffix inflections. Shorter words get stricter rules:
"cat"/"car" and "dog"/"dig" are different answers, "abby"/"abbey" is a typo.
"""
from functools import lru_cache

from engine.double_metaphone import phonetic_match
from engine.number_words import normalize_numbers
from engine.similarity import jaro_winkler, is_problematic_anagram

# Articulatory classes for first letters; vowels are never grouped
_FIRST_CHAR_CLASSES = {
    'c': 'k', 'k': 'k',
    'g': 'g', 'j': 'g',
    'f': 'f', 'v': 'f',
    'p': 'p', 'b': 'p',
    't': 't', 'd': 't',
    's': 's', 'z': 's',
    'm': 'm', 'n': 'm',
}

# (shortest length, phonetic threshold, literal threshold), longest first.
# A phonetic threshold of 0 means a phonetic match alone is enough.
LENGTH_TIERS = (
    (9, 0.0, 0.85),
    (6, 0.80, 0.88),
    (4, 0.85, 0.92),
)
SHORT_WORD_THRESHOLD = 0.85

# (suffix to remove, replacement, minimum word length)
SUFFIX_STRIP_RULES = (
    ('ies', 'y', 5),
    ('es', '', 4),
    ('s', '', 4),
    ('ing', '', 6),
    ('ed', '', 5),
)
SUFFIX_ADD_RULES = ('s', 'es', 'ing', 'ed')


def phonetic_first_char(word):
    """First letter folded into its articulatory class ("c" and "k" -> "k")."""
    if not word:
        return ''
    first = word[0]
    return _FIRST_CHAR_CLASSES.get(first, first)


@lru_cache(maxsize=4096)
def suffix_variants(word):
    """The word plus its plural/inflection variants ("berries" -> "berry", ...)."""
    variants = {word}
    for suffix, replacement, min_length in SUFFIX_STRIP_RULES:
        if word.endswith(suffix) and len(word) >= min_length:
            if suffix == 's' and word.endswith('ss'):
                continue
            variants.add(word[:-len(suffix)] + replacement)
    if word.endswith('y') and len(word) > 2:
        variants.add(word[:-1] + 'ies')
    for suffix in SUFFIX_ADD_RULES:
        variants.add(word + suffix)
    return frozenset(variants)


def _passes_length_tier(word1, word2, score):
    """Tier picked by the shorter word; the longer may be at most twice as long."""
    shorter, longer = sorted((len(word1), len(word2)))
    if longer > 2 * shorter:
        return False

    for min_length, phonetic_threshold, literal_threshold in LENGTH_TIERS:
        if shorter < min_length:
            continue
        if (score >= phonetic_threshold
                and phonetic_first_char(word1) == phonetic_first_char(word2)
                and phonetic_match(word1, word2)):
            return True
        return score >= literal_threshold and word1[0] == word2[0]
    return False


def _suffix_variants_match(word1, word2):
    """Any inflection pair, the words themselves included, equal or sounding alike."""
    for v1 in suffix_variants(word1):
        for v2 in suffix_variants(word2):
            if v1 == v2 or phonetic_match(v1, v2):
                return True
    return False


def are_similar(word1, word2):
    """True if two normalized words should count as the same answer word."""
    if word1 == word2:
        return True
    if not word1 or not word2:
        return False
    if is_problematic_anagram(word1, word2):
        return False

    score = jaro_winkler(word1, word2)

    if min(len(word1), len(word2)) <= 3:
        # Short words are decided here; suffix variants would turn
        # "dog"/"dig" into "dogs"/"digs"
        if (word1[0] == word2[0] and phonetic_match(word1, word2)
                and score >= SHORT_WORD_THRESHOLD):
            return True
        return normalize_numbers(word1) == normalize_numbers(word2)

    if _passes_length_tier(word1, word2, score):
        return True
    if normalize_numbers(word1) == normalize_numbers(word2):
        return True
    return _suffix_variants_match(word1, word2)
