# history.py
import os
import json
import logging
import datetime
import tempfile
import threading
from dataclasses import dataclass, field
from responses import ALL_RESPONSES, Response, Sentiment

logger = logging.getLogger(__name__)

SHAKEN_LABEL = "(shaken)"


def _catalog_response(text, sentiment):
    for response in ALL_RESPONSES:
        if response.text == text and response.sentiment is sentiment:
            return response
    raise ValueError(f"not a known answer: {text!r} ({sentiment.value})")


def _now():
    return datetime.datetime.now(datetime.timezone.utc)


@dataclass(frozen=True)
class HistoryEntry:
    """A single question/answer pair. A blank question means the ball was shaken."""
    question: str
    response: Response
    timestamp: datetime.datetime = field(default_factory=_now)

    @property
    def label(self):
        return self.question if self.question.strip() else SHAKEN_LABEL

    def to_dict(self):
        return {
            'question': self.question,
            'text': self.response.text,
            'sentiment': self.response.sentiment.value,
            'time': self.timestamp.isoformat(),
            'share_text': share_text(self),
        }

    @classmethod
    def from_dict(cls, data):
        response = _catalog_response(data['text'], Sentiment(data['sentiment']))
        timestamp = datetime.datetime.fromisoformat(data['time'])
        return cls(data.get('question', ''), response, timestamp)


def share_text(entry):
    if entry.question.strip():
        return f'I asked the Magic 8-Ball: "{entry.question}"\nAnswer: {entry.response.text}'
    return f"I shook the Magic 8-Ball and got: {entry.response.text}"


class History:
    """Newest-first list of answers, optionally mirrored to a JSON file.

    Safe to share between request threads: every change and the file
    write that follows it happen under one lock, and the file is replaced
    atomically so readers never see a half-written history.
    """

    def __init__(self, data_file=None, limit=200):
        self.data_file = data_file
        self.limit = max(int(limit), 0)
        self._items = []
        self._lock = threading.Lock()
        self._load_data()

    def _load_data(self):
        if not self.data_file or not os.path.exists(self.data_file):
            return
        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                raw = json.load(f)
            self._items = [HistoryEntry.from_dict(d) for d in raw.get('history', [])][:self.limit]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Could not load history from %s: %s", self.data_file, e)
            self._items = []

    def _save_data(self):
        # caller holds self._lock
        if not self.data_file:
            return
        data = {'history': [e.to_dict() for e in self._items]}
        directory = os.path.dirname(os.path.abspath(self.data_file))
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=directory,
                                             suffix='.tmp', delete=False) as f:
                tmp_path = f.name
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.data_file)
        except OSError as e:
            logger.warning("Error saving history to %s: %s", self.data_file, e)
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)

    def add(self, question, response):
        entry = HistoryEntry((question or "").strip(), response)
        with self._lock:
            self._items.insert(0, entry)
            # trim history
            del self._items[self.limit:]
            self._save_data()
        return entry

    def entries(self, limit=None):
        with self._lock:
            if limit is None:
                return list(self._items)
            return self._items[:max(limit, 0)]

    def clear(self):
        with self._lock:
            removed = len(self._items)
            self._items = []
            self._save_data()
        return removed

    def __len__(self):
        return len(self._items)
