"""Tests for services/answer_service.py."""
import logging

import pytest

from services import answer_service


def test_correct_answer_earns_points():
    result = answer_service.grade_answer('what is Paris', 'Paris', 400)
    assert result['is_correct'] is True
    assert result['points_earned'] == 400
    assert result['matched_answer'] == 'Paris'
    assert result['user_answer'] == 'what is Paris'
    assert result['correct_answer'] == 'Paris'


def test_wrong_answer_earns_nothing():
    result = answer_service.grade_answer('London', 'Paris', 400)
    assert result['is_correct'] is False
    assert result['points_earned'] == 0
    assert result['matched_answer'] is None


def test_default_point_value(monkeypatch):
    monkeypatch.setitem(answer_service.SCORING_DEFAULTS, 'default_point_value', 200)
    result = answer_service.grade_answer('Paris', 'Paris')
    assert result['points_earned'] == 200


def test_none_answers_graded_as_empty():
    result = answer_service.grade_answer(None, 'Paris', 200)
    assert result['is_correct'] is False
    assert result['user_answer'] == ''

    result = answer_service.grade_answer(None, None, 200)
    assert result['is_correct'] is True


def test_override_accepted():
    result = answer_service.grade_answer('Big Blue', 'IBM', 800, overrides=['Big Blue', None])
    assert result['is_correct'] is True
    assert result['points_earned'] == 800
    assert result['matched_answer'] == 'Big Blue'


def test_empty_override_ignored():
    """A punctuation-only override must not accept a blank answer."""
    result = answer_service.grade_answer('', 'Paris', 200, overrides=['?!', '  '])
    assert result['is_correct'] is False
    assert result['points_earned'] == 0


def test_grading_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger='services.answer_service'):
        answer_service.grade_answer('Paris', 'Paris', 200)
    assert 'correct=True' in caplog.text


def test_normalize_override():
    assert answer_service.normalize_override('  The Big Apple! ') == 'big apple'


@pytest.mark.parametrize('answer', ['', None, '?!'])
def test_normalize_override_rejects_empty(answer):
    with pytest.raises(ValueError):
        answer_service.normalize_override(answer)
