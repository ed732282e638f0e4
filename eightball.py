# eightball.py
import re
import random
import logging
from responses import (
    Sentiment, ALL_RESPONSES, RESPONSES_BY_SENTIMENT, KEYWORDS, KEYWORD_BOOST
)

logger = logging.getLogger(__name__)

_WORD_SPLIT = re.compile(r"\W+")


def tokenize(question):
    """Lower-case the question and return its unique word tokens."""
    text = (question or "").lower()
    return frozenset(w for w in _WORD_SPLIT.split(text) if w)


class EightBall:
    """Picks a Magic 8-Ball answer, biased by keywords found in the question.

    Every sentiment group starts at the same base weight and each keyword hit
    adds KEYWORD_BOOST to its group. A group is rolled first, then a response
    is chosen uniformly inside that group, so the 10/5/5 split of the catalog
    never changes how much a keyword counts.
    """

    base_weight = 1.0

    def __init__(self, rng=None, boost=KEYWORD_BOOST):
        # rng needs random() and choice(); tests pass a seeded random.Random
        self.rng = rng if rng is not None else random.Random()
        self.boost = boost

    def score(self, question):
        words = tokenize(question)
        scores = {}
        for sentiment, keywords in KEYWORDS.items():
            scores[sentiment] = sum(1 for w in words if w in keywords)
        return scores

    def group_weights(self, question):
        hits = self.score(question)
        return {s: self.base_weight + hits[s] * self.boost for s in Sentiment}

    def _pick_sentiment(self, weights):
        total = sum(weights.values())
        roll = self.rng.random() * total
        if roll < weights[Sentiment.POSITIVE]:
            return Sentiment.POSITIVE
        if roll < weights[Sentiment.POSITIVE] + weights[Sentiment.NEUTRAL]:
            return Sentiment.NEUTRAL
        return Sentiment.NEGATIVE

    def ask(self, question: str = ""):
        weights = self.group_weights(question)
        sentiment = self._pick_sentiment(weights)
        response = self.rng.choice(RESPONSES_BY_SENTIMENT[sentiment])
        logger.debug("ask %r weights=%s -> %s", question,
                     {s.value: w for s, w in weights.items()}, response.text)
        return response

    def shake(self):
        """Return any of the twenty answers with equal probability."""
        response = self.rng.choice(ALL_RESPONSES)
        logger.debug("shake -> %s", response.text)
        return response
