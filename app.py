# app.py
import os
import random
from flask import Flask, render_template, request, jsonify
from eightball import EightBall
from history import History
from responses import Sentiment
from shake import ShakeDetector, InvalidReading

SENTIMENT_COLORS = {
    Sentiment.POSITIVE: '#4caf50',
    Sentiment.NEUTRAL: '#ffb300',
    Sentiment.NEGATIVE: '#e53935',
}

app = Flask(__name__, static_folder="static", template_folder="templates")


def _env_int(name, default=None, minimum=None):
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        app.logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if minimum is not None and value < minimum:
        app.logger.warning("%s=%d is below %d, using %d", name, value, minimum, minimum)
        return minimum
    return value


def _make_rng():
    seed = _env_int('EIGHTBALL_SEED')
    return random.Random(seed) if seed is not None else None


def _make_history():
    return History(
        data_file=os.environ.get('EIGHTBALL_HISTORY_FILE') or None,
        limit=_env_int('EIGHTBALL_HISTORY_LIMIT', 200, minimum=0),
    )


ball = EightBall(rng=_make_rng())
history = _make_history()
detector = ShakeDetector()


def _response_json(response):
    return {
        'text': response.text,
        'sentiment': response.sentiment.value,
        'color': SENTIMENT_COLORS[response.sentiment],
    }


def _answer_json(entry):
    return {'response': _response_json(entry.response), 'entry': entry.to_dict()}


def _record_shake():
    return history.add("", ball.shake())


@app.route('/')
def index():
    return render_template('index.html', colors={s.value: c for s, c in SENTIMENT_COLORS.items()})


@app.route('/ask', methods=['POST'])
def ask():
    data = request.get_json(silent=True) or {}
    question = data.get('question', '') if isinstance(data, dict) else ''
    if not isinstance(question, str):
        question = ''
    response = ball.ask(question)
    entry = history.add(question, response)
    app.logger.debug("asked %r -> %s", question, response.text)
    return jsonify(_answer_json(entry))


@app.route('/shake', methods=['POST'])
def shake():
    return jsonify(_answer_json(_record_shake()))


@app.route('/motion', methods=['POST'])
def motion():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'expected a JSON object with x, y and z'}), 400
    try:
        shaken = detector.reading(data.get('x'), data.get('y'), data.get('z'))
    except InvalidReading as e:
        app.logger.info("rejected motion reading: %s", e)
        return jsonify({'error': str(e)}), 400
    if not shaken:
        return jsonify({'shaken': False})
    return jsonify(dict(shaken=True, **_answer_json(_record_shake())))


@app.route('/history', methods=['GET'])
def get_history():
    limit = request.args.get('limit', type=int)
    return jsonify({'history': [e.to_dict() for e in history.entries(limit)]})


@app.route('/history', methods=['DELETE'])
def clear_history():
    return jsonify({'cleared': history.clear()})


if __name__ == '__main__':
    # debug for dev only
    app.run(debug=os.environ.get('EIGHTBALL_DEBUG', '').lower() in ('1', 'true', 'yes'))
