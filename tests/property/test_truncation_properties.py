import string
from typing import List, Tuple

from hypothesis import given, settings, strategies as st

from buena_vista.config import WhitespaceMode
from buena_vista.text_cleaning import normalize_whitespace, prepare_segments
from buena_vista.truncation import truncation_pairs

alphabet = st.sampled_from(string.ascii_letters + "  .,!?-|()\"'\n\t&")
segment = st.text(alphabet=alphabet, max_size=60)
segments = st.lists(segment, max_size=5)
lengths = st.integers(min_value=1, max_value=150)
modes = st.sampled_from(list(WhitespaceMode))


def _split_index(pairs: List[Tuple[str, str]]) -> int:
    return next((i for i, (_, hidden) in enumerate(pairs) if hidden), len(pairs))


@given(segments, lengths, modes)
@settings(deadline=None)
def test_pairs_reconstruct_prepared_segments(texts, length, mode) -> None:
    pairs = truncation_pairs(texts, {"length": length, "whitespace": mode})
    assert [v + h for v, h in pairs] == list(prepare_segments(texts, mode))


@given(segments, lengths, modes)
@settings(deadline=None)
def test_at_most_one_split(texts, length, mode) -> None:
    pairs = truncation_pairs(texts, {"length": length, "whitespace": mode})
    index = _split_index(pairs)
    assert all(not hidden for _, hidden in pairs[:index])
    assert all(not visible for visible, _ in pairs[index + 1 :])


@given(segments, lengths, modes)
@settings(deadline=None)
def test_visible_text_before_last_visible_segment_fits_target(texts, length, mode) -> None:
    pairs = truncation_pairs(texts, {"length": length, "whitespace": mode})
    visible = [len(v) for v, _ in pairs if v]
    # Only the segment holding the chosen split point may overshoot.
    assert sum(visible[:-1]) <= length


@given(segments, lengths, modes)
@settings(deadline=None)
def test_short_input_is_fully_visible(texts, length, mode) -> None:
    prepared = prepare_segments(texts, mode)
    pairs = truncation_pairs(texts, {"length": length, "whitespace": mode})
    if sum(map(len, prepared)) <= length:
        assert all(hidden == "" for _, hidden in pairs)


@given(segment.filter(lambda s: s.strip()), lengths)
@settings(deadline=None)
def test_first_segment_never_fully_hidden(text, length) -> None:
    [(visible, _)] = truncation_pairs(text, {"length": length})
    assert visible


@given(st.data())
def test_unbroken_run_splits_exactly_at_target(data) -> None:
    text = data.draw(st.text(alphabet=string.ascii_letters, min_size=2, max_size=200))
    length = data.draw(st.integers(min_value=1, max_value=len(text) - 1))
    assert truncation_pairs(text, {"length": length}) == [(text[:length], text[length:])]


@given(st.text(max_size=80))
def test_normalize_whitespace_idempotent(sample: str) -> None:
    once = normalize_whitespace(sample)
    assert normalize_whitespace(once) == once
