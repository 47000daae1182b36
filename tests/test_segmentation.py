import pytest

from opinionkit.ingest import Response
from opinionkit.segmentation import SCORES, segment


def _response(index: int, score: int) -> Response:
    return Response(index=index, raw_text=f"text {index}", opinion_score=score, cleaned_text=f"text {index}")


def test_segment_creates_all_buckets() -> None:
    segments = segment([_response(0, 5)])
    for score in SCORES:
        assert isinstance(segments.bucket(score), tuple)
    assert len(segments.bucket(5)) == 1
    assert segments.bucket(3) == ()


def test_support_and_oppose_are_unions_ordered_by_index() -> None:
    responses = [_response(4, 4), _response(0, 5), _response(2, 1), _response(1, 2), _response(3, 3), _response(5, 4)]
    segments = segment(responses)
    assert [r.index for r in segments.support] == [0, 4, 5]
    assert [r.index for r in segments.oppose] == [1, 2]
    assert [r.index for r in segments.bucket(3)] == [3]


def test_segment_counts() -> None:
    segments = segment([_response(0, 1), _response(1, 1), _response(2, 4)])
    assert segments.counts() == {"1": 2, "2": 0, "3": 0, "4": 1, "5": 0, "support": 1, "oppose": 2}


def test_segment_unknown_bucket() -> None:
    with pytest.raises(KeyError):
        segment([]).bucket(6)
