"""Known groups of interchangeable answers (abbreviations, numerals, synonyms).

Groups are not disjoint: "football" sits in both the American football and
the soccer group, so equivalence is not transitive ("nfl" ~ "football" ~
"soccer" while "nfl" !~ "soccer"). overlapping_terms() lists such terms.
"""
import logging

from engine.text_normalizer import normalize

logger = logging.getLogger(__name__)

EQUIVALENT_TERMS = {
    # Sports
    'american_football': ('american football', 'football', 'nfl', 'gridiron'),
    'soccer': ('soccer', 'football', 'association football', 'futbol', 'fifa'),
    'basketball': ('basketball', 'nba', 'hoops'),
    'baseball': ('baseball', 'mlb'),
    'hockey': ('ice hockey', 'hockey', 'nhl'),
    'mma': ('mma', 'mixed martial arts', 'ufc'),
    # Wars
    'world_war_1': ('world war 1', 'world war i', 'world war one', 'wwi', 'ww1',
                    'first world war', 'the great war'),
    'world_war_2': ('world war 2', 'world war ii', 'world war two', 'wwii', 'ww2',
                    'second world war'),
    # Countries and places
    'united_states': ('united states', 'united states of america', 'usa', 'us',
                      'u.s.', 'u.s.a.', 'america', 'the states'),
    'united_kingdom': ('united kingdom', 'uk', 'u.k.', 'great britain', 'britain',
                       'gb'),
    'soviet_union': ('soviet union', 'ussr', 'u.s.s.r.', 'the soviets'),
    'uae': ('united arab emirates', 'uae', 'emirates'),
    'drc': ('democratic republic of the congo', 'drc', 'dr congo', 'congo kinshasa'),
    'new_york_city': ('new york city', 'nyc', 'the big apple'),
    'los_angeles': ('los angeles', 'la', 'l.a.'),
    'washington_dc': ('washington dc', 'washington d.c.', 'dc', 'district of columbia'),
    'netherlands': ('netherlands', 'the netherlands', 'holland'),
    # Organizations
    'un': ('united nations', 'un', 'u.n.'),
    'nasa': ('nasa', 'national aeronautics and space administration'),
    'eu': ('european union', 'eu'),
    # Science
    'dna': ('dna', 'deoxyribonucleic acid'),
    'tv': ('tv', 'television', 'telly'),
}


def _build_index(groups):
    """Map each normalized term to the set of group keys it belongs to."""
    index = {}
    for key, terms in groups.items():
        for term in terms:
            index.setdefault(normalize(term), set()).add(key)
    return {term: frozenset(keys) for term, keys in index.items()}


_TERM_INDEX = _build_index(EQUIVALENT_TERMS)


def overlapping_terms():
    """Normalized terms that belong to more than one group, with their groups."""
    return {term: keys for term, keys in _TERM_INDEX.items() if len(keys) > 1}


_overlaps = overlapping_terms()
if _overlaps:
    logger.debug('Equivalent terms shared between groups: %s',
                 ', '.join(f'{t} ({"/".join(sorted(k))})' for t, k in sorted(_overlaps.items())))


def check_equivalent_terms(a, b):
    """True if a and b normalize equal or share an equivalence group."""
    norm_a = normalize(a)
    norm_b = normalize(b)
    if norm_a == norm_b:
        return True
    groups_a = _TERM_INDEX.get(norm_a)
    groups_b = _TERM_INDEX.get(norm_b)
    if not groups_a or not groups_b:
        return False
    return bool(groups_a & groups_b)
