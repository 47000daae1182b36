import itertools

import pytest

pd = pytest.importorskip("pandas")

from opinionkit.ingest import Response, ingest
from opinionkit.sentiment import (
    SentimentRecord,
    most_negative,
    most_positive,
    rank_responses,
    ranked_report,
    sentiment_score,
)

LEXICON = {"love": 3.2, "good": 1.9, "fear": -2.2, "war": -2.9, "not": 0.0, "hate": -2.7}


def _response(index: int, text: str) -> Response:
    return Response(index=index, raw_text=text, opinion_score=3, cleaned_text=text)


def test_sentiment_score_sums_lexicon_weights() -> None:
    assert sentiment_score("I love the good economy", LEXICON) == pytest.approx(5.1)
    assert sentiment_score("Fear, war and more WAR", LEXICON) == pytest.approx(-8.0)


def test_sentiment_score_unknown_and_empty() -> None:
    assert sentiment_score("nothing known here", LEXICON) == 0.0
    assert sentiment_score("", LEXICON) == 0.0
    assert sentiment_score(None, LEXICON) == 0.0


def test_rank_responses_orders_ascending_with_index_ties() -> None:
    responses = [
        _response(0, "love"),
        _response(1, "war"),
        _response(2, "neutral words"),
        _response(3, "fear"),
        _response(4, "plain words"),
    ]
    ranking = rank_responses(responses, LEXICON)
    assert [record.index for record in ranking] == [1, 3, 2, 4, 0]
    assert ranking[0] == SentimentRecord(index=1, score=-2.9)


def test_rank_responses_is_stable_under_permutation() -> None:
    responses = [
        _response(0, "love love"),
        _response(1, "war"),
        _response(2, "good"),
        _response(3, "hate"),
        _response(4, "nothing"),
        _response(5, "also nothing"),
    ]
    expected = rank_responses(responses, LEXICON)
    for permutation in itertools.permutations(responses):
        ranking = rank_responses(permutation, LEXICON)
        assert ranking == expected
        assert most_negative(ranking, 2) == most_negative(expected, 2)
        assert most_positive(ranking, 2) == most_positive(expected, 2)


def test_most_negative_and_positive_slices() -> None:
    ranking = [SentimentRecord(i, float(i)) for i in range(6)]
    assert [r.index for r in most_negative(ranking, 2)] == [0, 1]
    assert [r.index for r in most_positive(ranking, 2)] == [4, 5]
    assert most_positive(ranking, 0) == []
    assert most_negative(ranking, -3) == []
    assert rank_responses([], LEXICON) == []


def test_ranked_report_uses_original_text() -> None:
    frame = pd.DataFrame(
        [("h1", "h1"), ("h2", "h2"), ("I love it!", 5), ("War. Fear.", 1), ("ok", 3)],
        columns=["response", "score"],
    )
    responses = ingest(frame, "response", "score")
    ranking = rank_responses(responses.responses, LEXICON)
    report = ranked_report(ranking, responses, 1)
    assert report["most_negative"] == [(1, "War. Fear.", pytest.approx(-5.1))]
    assert report["most_positive"] == [(0, "I love it!", pytest.approx(3.2))]
