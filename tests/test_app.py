"""
API tests for the web endpoints
"""
from eightball import EightBall
from responses import ALL_RESPONSES


def catalog_texts():
    return {r.text for r in ALL_RESPONSES}


def test_index_renders(client):
    response = client.get('/')
    assert response.status_code == 200
    assert b"Magic 8-Ball" in response.data


def test_ask_returns_answer_and_records_it(client):
    response = client.post('/ask', json={'question': 'Will I be successful?'})
    assert response.status_code == 200
    data = response.get_json()
    assert data['response']['text'] in catalog_texts()
    assert data['response']['sentiment'] in ('positive', 'neutral', 'negative')
    assert data['response']['color'].startswith('#')
    assert data['entry']['question'] == 'Will I be successful?'

    history = client.get('/history').get_json()['history']
    assert len(history) == 1
    assert history[0]['text'] == data['response']['text']


def test_ask_without_body_is_blank_question(client):
    response = client.post('/ask', data="not json", content_type='text/plain')
    assert response.status_code == 200
    data = response.get_json()
    assert data['entry']['question'] == ''
    assert data['response']['text'] in catalog_texts()


def test_ask_ignores_non_string_question(client):
    response = client.post('/ask', json={'question': 42})
    assert response.status_code == 200
    assert response.get_json()['entry']['question'] == ''


def test_shake_records_blank_question(client):
    data = client.post('/shake').get_json()
    assert data['response']['text'] in catalog_texts()
    assert data['entry']['share_text'].startswith("I shook the Magic 8-Ball")


def test_history_newest_first_with_limit(client):
    client.post('/ask', json={'question': 'first'})
    client.post('/ask', json={'question': 'second'})
    history = client.get('/history?limit=1').get_json()['history']
    assert [e['question'] for e in history] == ['second']


def test_clear_history(client):
    client.post('/shake')
    client.post('/shake')
    assert client.delete('/history').get_json() == {'cleared': 2}
    assert client.get('/history').get_json() == {'history': []}


def test_motion_below_threshold(client):
    data = client.post('/motion', json={'x': 0, 'y': 0, 'z': 9.8}).get_json()
    assert data == {'shaken': False}


def test_motion_shake_returns_answer(client, monkeypatch):
    import app as app_module
    from shake import ShakeDetector

    monkeypatch.setattr(app_module, 'detector', ShakeDetector())
    data = client.post('/motion', json={'x': 40, 'y': 0, 'z': 0}).get_json()
    assert data['shaken'] is True
    assert data['response']['text'] in catalog_texts()
    assert data['entry']['question'] == ''


def test_motion_rejects_bad_reading(client):
    response = client.post('/motion', json={'x': 'fast', 'y': 0, 'z': 0})
    assert response.status_code == 400
    assert 'error' in response.get_json()

    response = client.post('/motion', json=[1, 2, 3])
    assert response.status_code == 400


def test_shake_outside_request_context(client):
    import app as app_module

    entry = app_module._record_shake()
    assert entry.question == ''
    assert client.get('/history').get_json()['history'][0]['text'] == entry.response.text


# ── environment settings ────────────────────────────────────────────

def test_seed_makes_answers_repeatable(monkeypatch):
    import app as app_module

    monkeypatch.setenv('EIGHTBALL_SEED', '7')
    first = EightBall(rng=app_module._make_rng())
    second = EightBall(rng=app_module._make_rng())
    assert [first.shake() for _ in range(10)] == [second.shake() for _ in range(10)]


def test_bad_seed_is_ignored(monkeypatch, caplog):
    import app as app_module

    monkeypatch.setenv('EIGHTBALL_SEED', 'lucky')
    assert app_module._make_rng() is None
    assert "EIGHTBALL_SEED" in caplog.text


def test_unset_seed_uses_default_rng(monkeypatch):
    import app as app_module

    monkeypatch.delenv('EIGHTBALL_SEED', raising=False)
    assert app_module._make_rng() is None


def test_history_settings(monkeypatch, tmp_path):
    import app as app_module

    monkeypatch.setenv('EIGHTBALL_HISTORY_FILE', str(tmp_path / "history.json"))
    monkeypatch.setenv('EIGHTBALL_HISTORY_LIMIT', '5')
    history = app_module._make_history()
    assert history.limit == 5
    assert history.data_file == str(tmp_path / "history.json")


def test_negative_history_limit_is_clamped(monkeypatch, caplog):
    import app as app_module

    monkeypatch.delenv('EIGHTBALL_HISTORY_FILE', raising=False)
    monkeypatch.setenv('EIGHTBALL_HISTORY_LIMIT', '-3')
    history = app_module._make_history()
    assert history.limit == 0
    assert "EIGHTBALL_HISTORY_LIMIT" in caplog.text


def test_non_integer_history_limit_uses_default(monkeypatch, caplog):
    import app as app_module

    monkeypatch.delenv('EIGHTBALL_HISTORY_FILE', raising=False)
    monkeypatch.setenv('EIGHTBALL_HISTORY_LIMIT', 'lots')
    assert app_module._make_history().limit == 200
    assert "EIGHTBALL_HISTORY_LIMIT" in caplog.text
