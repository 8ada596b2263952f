"""Structural answer handling: parenthetical alternates and multi-part lists."""
import re

from config.settings import MATCH_DEFAULTS
from engine.equivalent_terms import check_equivalent_terms
from engine.text_normalizer import clean_user_answer, normalize
from engine.word_similarity import are_similar

_OR_ALTERNATE_RE = re.compile(r'^(.+?)\s*\(\s*or\s+(.+?)\s*\)\s*$', re.IGNORECASE)
_PARENTHETICAL_RE = re.compile(r'^(.*?)\s*\((.+?)\)\s*(.*)$')
_LIST_JOINER_RE = re.compile(r'\s+and\s+|&', re.IGNORECASE)


def handle_parenthetical_name(answer):
    """Accepted spellings of an answer carrying a parenthetical.

    "Abraham Lincoln (or Honest Abe)" -> {"Abraham Lincoln", "Honest Abe"}
    "the (Cincinnati) Reds" -> the original, "the Cincinnati Reds", "the",
    "the Reds"
    "(Robert) Pattinson" -> the original, "Robert Pattinson", "Pattinson"
    """
    match = _OR_ALTERNATE_RE.match(answer)
    if match:
        return {match.group(1).strip(), match.group(2).strip()}

    variants = {answer}
    match = _PARENTHETICAL_RE.match(answer)
    if match:
        before, middle, after = (part.strip() for part in match.groups())
        variants.add(' '.join(p for p in (before, middle, after) if p))
        if before:
            variants.add(before)
        without = ' '.join(p for p in (before, after) if p)
        if without:
            variants.add(without)
    return variants


def is_list(answer):
    return '&' in answer or ',' in answer or ' and ' in answer


def normalize_list(text):
    """Split a multi-part answer into normalized items, in order."""
    parts = _LIST_JOINER_RE.sub(',', text).split(',')
    items = []
    for part in parts:
        item = normalize(part)
        if item:
            items.append(item)
    return items


def is_proper_noun(answer):
    """True for capitalized multi-word names ("Bosnia And Herzegovina")."""
    tokens = answer.split()
    return len(tokens) >= 2 and all(token[0].isupper() for token in tokens)


def items_match(user_item, correct_item):
    """True if two normalized list items name the same thing."""
    if user_item == correct_item:
        return True
    if user_item.replace(' ', '') == correct_item.replace(' ', ''):
        return True
    if check_equivalent_terms(user_item, correct_item):
        return True
    user_words = user_item.split()
    correct_words = correct_item.split()
    if len(user_words) != len(correct_words):
        return False
    return all(are_similar(u, c) for u, c in zip(user_words, correct_words))


def _has_one_to_one_pairing(user_items, correct_items):
    """Bipartite matching: every correct item gets its own user item."""
    candidates = [
        [j for j, user_item in enumerate(user_items) if items_match(user_item, correct_item)]
        for correct_item in correct_items
    ]
    owner = {}

    def assign(i, seen):
        for j in candidates[i]:
            if j in seen:
                continue
            seen.add(j)
            if j not in owner or assign(owner[j], seen):
                owner[j] = i
                return True
        return False

    return all(assign(i, set()) for i in range(len(correct_items)))


def list_matches(user_answer, correct_answer,
                 one_to_one=MATCH_DEFAULTS['list_one_to_one']):
    """Every correct item must have a similar item in the user's list.

    Order does not matter. By default one user item may cover several
    correct items; with one_to_one each correct item needs a distinct one.
    """
    correct_items = normalize_list(correct_answer)
    user_items = [item for item in map(clean_user_answer, normalize_list(user_answer)) if item]
    if not correct_items:
        return not user_items
    if one_to_one:
        return _has_one_to_one_pairing(user_items, correct_items)
    return all(
        any(items_match(user_item, correct_item) for user_item in user_items)
        for correct_item in correct_items
    )
