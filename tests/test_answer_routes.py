"""Tests for routes/answers.py and the app-level handlers."""


def test_grade_correct(client):
    resp = client.post('/answers/grade', json={
        'user_answer': 'who is Abraham Lincoln',
        'correct_answer': 'Abraham Lincoln (or Honest Abe)',
        'point_value': 600,
    })
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['is_correct'] is True
    assert data['points_earned'] == 600


def test_grade_wrong(client):
    resp = client.post('/answers/grade', json={
        'user_answer': 'god', 'correct_answer': 'dog', 'point_value': 200,
    })
    assert resp.status_code == 200
    assert resp.get_json()['points_earned'] == 0


def test_grade_with_override(client):
    resp = client.post('/answers/grade', json={
        'user_answer': 'Big Blue', 'correct_answer': 'IBM',
        'point_value': 400, 'overrides': ['Big Blue'],
    })
    data = resp.get_json()
    assert data['is_correct'] is True
    assert data['matched_answer'] == 'Big Blue'


def test_missing_user_answer_graded_as_empty(client):
    resp = client.post('/answers/grade', json={'correct_answer': 'Paris', 'point_value': 200})
    assert resp.status_code == 200
    assert resp.get_json()['is_correct'] is False


def test_rejects_non_json(client):
    resp = client.post('/answers/grade', data='not json')
    assert resp.status_code == 400
    assert 'error' in resp.get_json()


def test_rejects_non_string_answer(client):
    resp = client.post('/answers/grade', json={'user_answer': 5, 'correct_answer': 'Paris'})
    assert resp.status_code == 400


def test_rejects_bad_point_value(client):
    for value in (-100, 'lots', True, 1.5):
        resp = client.post('/answers/grade', json={
            'user_answer': 'Paris', 'correct_answer': 'Paris', 'point_value': value,
        })
        assert resp.status_code == 400


def test_rejects_bad_overrides(client):
    resp = client.post('/answers/grade', json={
        'user_answer': 'Paris', 'correct_answer': 'Paris', 'overrides': 'Paris',
    })
    assert resp.status_code == 400


def test_get_not_allowed(client):
    assert client.get('/answers/grade').status_code == 405


def test_error_handler_hides_details(app):
    """Error handler should NOT leak exception details."""
    @app.route('/test-500')
    def crash():
        raise ValueError('secret token xyz123')

    with app.test_client() as c:
        resp = c.get('/test-500')
        assert resp.status_code == 500
        body = resp.data.decode()
        assert 'xyz123' not in body
        assert 'Internal Server Error' in body


def test_nosniff_header(client):
    resp = client.post('/answers/grade', json={'user_answer': 'a', 'correct_answer': 'a'})
    assert resp.headers.get('X-Content-Type-Options') == 'nosniff'
