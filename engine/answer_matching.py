"""Answer matching for free-text trivia answers.

check_answer() decides whether a player's typed answer counts as the
canonical answer; calculate_points() turns that decision into a point award.
Scoring is all-or-nothing: the similarity thresholds already carry the
leniency, so close misses earn nothing.
"""
import logging

from config.settings import MATCH_DEFAULTS
from engine.answer_structure import (handle_parenthetical_name, is_list,
                                     is_proper_noun, list_matches)
from engine.double_metaphone import phonetic_match
from engine.equivalent_terms import check_equivalent_terms
from engine.similarity import jaro_winkler, is_problematic_anagram
from engine.text_normalizer import (clean_user_answer, normalize,
                                    phonetic_normalize, strip_title_prefix)
from engine.word_similarity import are_similar, phonetic_first_char

logger = logging.getLogger(__name__)

SHORT_ANSWER_MAX_WORDS = 2
COMPRESSED_PHONETIC_THRESHOLD = 0.85
COMPRESSED_LITERAL_THRESHOLD = 0.92


def check_answer(user_answer, correct_answer):
    """Check if user_answer should count as correct_answer.

    Rules run in a fixed order and the first one that accepts wins:
    compressed equality, respelled equality, equivalent terms,
    parenthetical variants, list matching, then word-level similarity.
    Both arguments must be strings; callers map missing answers to "".
    """
    user = clean_user_answer(user_answer)
    correct = normalize(correct_answer)
    user_compressed = user.replace(' ', '')
    correct_compressed = correct.replace(' ', '')

    if user_compressed == correct_compressed:
        return _accept('compressed form', user_answer, correct_answer)

    if phonetic_normalize(user_compressed) == phonetic_normalize(correct_compressed):
        return _accept('respelling', user_answer, correct_answer)

    if check_equivalent_terms(user, correct):
        return _accept('equivalent terms', user_answer, correct_answer)

    for variant in handle_parenthetical_name(correct_answer):
        if _variant_matches(user, normalize(variant)):
            return _accept('parenthetical variant', user_answer, correct_answer)

    if is_list(correct_answer) and not is_proper_noun(correct_answer):
        matched = list_matches(user_answer, correct_answer)
        if matched:
            _accept('list items', user_answer, correct_answer)
        return matched

    user_words = user.split()
    correct_words = correct.split()
    if len(correct_words) <= SHORT_ANSWER_MAX_WORDS:
        matched = _short_answer_matches(user_compressed, correct_compressed,
                                        user_words, correct_words)
    else:
        matched = _long_answer_matches(user_words, correct_words)
    if matched:
        _accept('word similarity', user_answer, correct_answer)
    return matched


def _accept(rule, user_answer, correct_answer):
    logger.debug('Accepted %r for %r via %s', user_answer, correct_answer, rule)
    return True


def _variant_matches(user, variant):
    if not variant:
        return False
    if user == variant or user.replace(' ', '') == variant.replace(' ', ''):
        return True
    user_bare = strip_title_prefix(user)
    variant_bare = strip_title_prefix(variant)
    return (user_bare == variant_bare
            or user_bare.replace(' ', '') == variant_bare.replace(' ', ''))


def _short_answer_matches(user, correct, user_words, correct_words):
    """One- and two-word answers, compared mostly on their compressed forms."""
    if is_problematic_anagram(user, correct):
        return False

    score = jaro_winkler(user, correct)
    if (score >= COMPRESSED_PHONETIC_THRESHOLD
            and phonetic_first_char(user) == phonetic_first_char(correct)
            and phonetic_match(user, correct)):
        return True

    if (correct_words and len(user_words) == len(correct_words)
            and all(are_similar(u, c) for u, c in zip(user_words, correct_words))):
        return True

    return score >= COMPRESSED_LITERAL_THRESHOLD and user[:1] == correct[:1]


def _long_answer_matches(user_words, correct_words,
                         ratio=MATCH_DEFAULTS['long_answer_word_ratio']):
    """Three or more words: most correct words need a similar user word."""
    matched = sum(
        1 for correct_word in correct_words
        if any(are_similar(user_word, correct_word) for user_word in user_words)
    )
    return matched / len(correct_words) >= ratio


def calculate_points(user_answer, correct_answer, base_points):
    """Full base_points for a correct answer, 0 otherwise."""
    return base_points if check_answer(user_answer, correct_answer) else 0


def find_accepted_answer(user_answer, correct_answer, overrides=None):
    """The canonical answer or first override that accepts user_answer, else None."""
    if check_answer(user_answer, correct_answer):
        return correct_answer
    for override in overrides or ():
        if check_answer(user_answer, override):
            return override
    return None


def check_answer_with_overrides(user_answer, correct_answer, overrides=None):
    """check_answer() against the canonical answer and any accepted overrides."""
    return find_accepted_answer(user_answer, correct_answer, overrides) is not None
