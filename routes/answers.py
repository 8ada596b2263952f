"""Answer routes — grade a submitted answer."""
import logging

from flask import Blueprint, request, jsonify

from services import answer_service

logger = logging.getLogger(__name__)
answers_bp = Blueprint('answers', __name__)


def _bad_request(message):
    logger.warning('Rejected grading request: %s', message)
    return jsonify({'error': message}), 400


@answers_bp.route('/grade', methods=['POST'])
def grade():
    """Grade {user_answer, correct_answer, point_value?, overrides?}."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return _bad_request('Expected a JSON object')

    user_answer = body.get('user_answer')
    correct_answer = body.get('correct_answer')
    for name, value in (('user_answer', user_answer), ('correct_answer', correct_answer)):
        if value is not None and not isinstance(value, str):
            return _bad_request(f'{name} must be a string')

    point_value = body.get('point_value')
    if point_value is not None and (
            isinstance(point_value, bool) or not isinstance(point_value, int)
            or point_value < 0):
        return _bad_request('point_value must be a non-negative integer')

    overrides = body.get('overrides') or []
    if not isinstance(overrides, list) or not all(isinstance(o, str) for o in overrides):
        return _bad_request('overrides must be a list of strings')

    result = answer_service.grade_answer(user_answer, correct_answer,
                                         point_value, overrides)
    return jsonify(result)
