"""Grade player answers against a clue's canonical answer and its overrides."""
import logging

from config.settings import SCORING_DEFAULTS
from engine.answer_matching import find_accepted_answer
from engine.text_normalizer import normalize

logger = logging.getLogger(__name__)


def grade_answer(user_answer, correct_answer, point_value=None, overrides=None):
    """Grade one answer submission.

    Missing answers are graded as empty strings. Points are all-or-nothing:
    point_value (or the configured default) when accepted, 0 otherwise.
    Overrides that normalize to nothing are ignored.

    Returns dict with: is_correct, points_earned, matched_answer,
    user_answer, correct_answer.
    """
    user_answer = user_answer or ''
    correct_answer = correct_answer or ''
    if point_value is None:
        point_value = SCORING_DEFAULTS['default_point_value']
    overrides = _usable_overrides(overrides)

    matched_answer = find_accepted_answer(user_answer, correct_answer, overrides)
    is_correct = matched_answer is not None
    points = point_value if is_correct else 0

    logger.info('Graded %r against %r: correct=%s points=%d%s',
                user_answer, correct_answer, is_correct, points,
                f' (override {matched_answer!r})'
                if is_correct and matched_answer != correct_answer else '')

    return {
        'is_correct': is_correct,
        'points_earned': points,
        'matched_answer': matched_answer,
        'user_answer': user_answer,
        'correct_answer': correct_answer,
    }


def _usable_overrides(overrides):
    usable = []
    for override in overrides or []:
        try:
            normalize_override(override)
        except ValueError:
            logger.warning('Ignoring empty override %r', override)
            continue
        usable.append(override)
    return usable


def normalize_override(answer):
    """Normalize an accepted-answer override for storage.

    Raises ValueError when nothing is left after normalization.
    """
    normalized = normalize(answer or '')
    if not normalized:
        raise ValueError(f'Override {answer!r} is empty after normalization')
    return normalized
