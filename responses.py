# responses.py
from collections import namedtuple
from enum import Enum


class Sentiment(Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


Response = namedtuple('Response', ['text', 'sentiment'])

# weight added to a sentiment group per keyword hit
KEYWORD_BOOST = 2.0

ALL_RESPONSES = (
    # positive (10)
    Response("It is certain", Sentiment.POSITIVE),
    Response("It is decidedly so", Sentiment.POSITIVE),
    Response("Without a doubt", Sentiment.POSITIVE),
    Response("Yes, definitely", Sentiment.POSITIVE),
    Response("You may rely on it", Sentiment.POSITIVE),
    Response("As I see it, yes", Sentiment.POSITIVE),
    Response("Most likely", Sentiment.POSITIVE),
    Response("Outlook good", Sentiment.POSITIVE),
    Response("Yes", Sentiment.POSITIVE),
    Response("Signs point to yes", Sentiment.POSITIVE),
    # neutral (5)
    Response("Reply hazy, try again", Sentiment.NEUTRAL),
    Response("Ask again later", Sentiment.NEUTRAL),
    Response("Better not tell you now", Sentiment.NEUTRAL),
    Response("Cannot predict now", Sentiment.NEUTRAL),
    Response("Concentrate and ask again", Sentiment.NEUTRAL),
    # negative (5)
    Response("Don't count on it", Sentiment.NEGATIVE),
    Response("My reply is no", Sentiment.NEGATIVE),
    Response("My sources say no", Sentiment.NEGATIVE),
    Response("Outlook not so good", Sentiment.NEGATIVE),
    Response("Very doubtful", Sentiment.NEGATIVE),
)

RESPONSES_BY_SENTIMENT = {
    sentiment: tuple(r for r in ALL_RESPONSES if r.sentiment is sentiment)
    for sentiment in Sentiment
}

POSITIVE_KEYWORDS = frozenset([
    'love', 'loved', 'loving', 'lovely',
    'happy', 'happiness', 'happily',
    'good', 'great',
    'succeed', 'success', 'successful', 'successfully',
    'win', 'winning', 'winner',
    'achieve', 'achieved', 'achievement', 'achieving',
    'help', 'helped', 'helpful', 'helping',
    'better', 'best',
    'improve', 'improved', 'improvement', 'improving',
    'wonderful', 'wonderfully',
    'amazing', 'amazed', 'amazingly',
    'excellent', 'excellence',
    'fantastic',
    'perfect', 'perfectly',
    'right',
    'hope', 'hoping', 'hopeful', 'hopefully',
    'lucky', 'fortunate', 'fortune',
    'brilliant', 'awesome', 'outstanding',
    'confident', 'confidence',
    'joy', 'joyful',
    'positive', 'optimistic',
    'beautiful', 'superb', 'exceptional',
    'thrive', 'thriving', 'prosper', 'prosperity',
])

NEGATIVE_KEYWORDS = frozenset([
    'fail', 'failed', 'failing', 'failure',
    'bad', 'badly',
    'wrong', 'wrongly',
    'lose', 'losing', 'loser', 'lost',
    'hurt', 'hurting', 'hurtful',
    'afraid',
    'worried', 'worry', 'worrying',
    'risk', 'risky',
    'danger', 'dangerous', 'dangerously',
    'problem', 'problematic', 'problems',
    'issue', 'issues',
    'trouble', 'troubled', 'troubling',
    'difficult', 'difficulty',
    'worse', 'worst',
    'terrible', 'terribly',
    'awful', 'awfully',
    'horrible', 'horribly',
    'never',
    'impossible', 'impossibly',
    'hate', 'hated', 'hating', 'hatred',
    'sad', 'sadly', 'sadness',
    'angry', 'anger',
    'fear', 'fearful', 'feared',
    'regret', 'regretful', 'regretting',
    'disaster', 'disastrous',
    'miserable', 'miserably',
    'unfortunate', 'unfortunately',
    'painful', 'painfully', 'pain',
    'destroy', 'destroyed', 'destruction',
    'ruin', 'ruined',
])

# "uncertain" words push toward the neutral group
UNCERTAIN_KEYWORDS = frozenset([
    'maybe', 'perhaps', 'possibly', 'possible',
    'unsure', 'uncertain', 'uncertainty',
    'think', 'thinking',
    'guess', 'guessing',
    'wonder', 'wondering',
    'doubt', 'doubtful', 'doubting',
    'complicated',
    'confusing', 'confused', 'confuse',
    'might', 'could',
    'sometimes', 'somehow',
    'unclear', 'unknown',
    'depends', 'depending',
    'questionable',
    'undecided', 'indecisive',
    'probably', 'likely',
    'chance', 'chances',
])

KEYWORDS = {
    Sentiment.POSITIVE: POSITIVE_KEYWORDS,
    Sentiment.NEUTRAL: UNCERTAIN_KEYWORDS,
    Sentiment.NEGATIVE: NEGATIVE_KEYWORDS,
}
