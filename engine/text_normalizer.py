"""Text normalization for answer comparison.

normalize() is idempotent: normalize(normalize(x)) == normalize(x).
"""
import re
import unicodedata

# Leading words dropped while more than one word remains
LEADING_FILLERS = frozenset([
    'my', 'your', 'his', 'her', 'their', 'our', 'its',
    'a', 'an', 'the',
])

TITLE_PREFIXES = frozenset([
    'mr', 'mrs', 'ms', 'miss', 'dr', 'doctor', 'prof', 'professor',
    'mt', 'mount', 'st', 'saint', 'sir', 'dame', 'lord', 'lady',
])

_DASHES_RE = re.compile(r'[\u2010-\u2015\u2212\ufe58\ufe63\uff0d-]')
# Anything that is not a letter, digit, whitespace or '&'
_STRIP_RE = re.compile(r'[^\w\s&]|_')
_AMPERSAND_RE = re.compile(r'\s*&\s*')
_WHITESPACE_RE = re.compile(r'\s+')
_QUESTION_PHRASE_RE = re.compile(r'^(?:what|who|where|when)(?: (?:is|are|was|were)|s) ')

# Respelling rules, applied in order to compressed forms
_RESPELLINGS = (
    (re.compile(r'ought'), 'ot'),
    (re.compile(r'ough'), 'o'),
    (re.compile(r'[ea]igh'), 'e'),
    (re.compile(r'ight'), 'ite'),
    (re.compile(r'ght'), 't'),
    (re.compile(r'^kn'), 'n'),
    (re.compile(r'^wr'), 'r'),
    (re.compile(r'mb$'), 'm'),
    (re.compile(r'bt$'), 't'),
    (re.compile(r'ph'), 'f'),
    (re.compile(r'ay|ey|ea|ee'), 'e'),
    (re.compile(r'(.)\1+'), r'\1'),
)


def strip_accents(text):
    """Decompose accented characters and drop the combining marks."""
    decomposed = unicodedata.normalize('NFD', text)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize(text):
    """Canonical form: lowercase, no accents, no punctuation, '&' spelled out.

    Leading possessive pronouns and articles are dropped as long as more
    than one word remains ("the eiffel tower" -> "eiffel tower", "the" ->
    "the").
    """
    text = strip_accents(text.lower())
    text = _DASHES_RE.sub(' ', text)
    text = _STRIP_RE.sub('', text)
    text = _AMPERSAND_RE.sub(' and ', text)
    text = _WHITESPACE_RE.sub(' ', text).strip()
    if not text:
        return ''

    words = text.split(' ')
    while len(words) > 1 and words[0] in LEADING_FILLERS:
        words.pop(0)
    return ' '.join(words)


def compress(text):
    """Normalized form with all whitespace removed ("cray-cray" -> "craycray")."""
    return normalize(text).replace(' ', '')


def strip_question_phrase(normalized):
    """Drop a leading "what is" / "who was" / "what's" from a normalized answer."""
    return _QUESTION_PHRASE_RE.sub('', normalized, count=1)


def clean_user_answer(text):
    """Normalize a player's answer, dropping any question phrasing.

    Normalizes again after the phrase is gone so an article behind it is
    stripped too ("what is a banana" -> "banana").
    """
    return normalize(strip_question_phrase(normalize(text)))


def strip_title_prefix(normalized):
    """Drop a leading honorific ("dr seuss" -> "seuss") from a normalized answer."""
    words = normalized.split(' ')
    if len(words) > 1 and words[0] in TITLE_PREFIXES:
        return ' '.join(words[1:])
    return normalized


def phonetic_normalize(compressed):
    """Collapse common respellings so sound-alike forms compare equal.

    "phone" and "fone" both become "fone"; "night" and "nite" both "nite".
    """
    for pattern, replacement in _RESPELLINGS:
        compressed = pattern.sub(replacement, compressed)
    return compressed
