"""Test cases for character-window chunking."""

import pytest

from docchat import chunking
from docchat.chunking import chunk_text, chunk_spans


def _reconstruct(text, spans):
    """Stitch chunks back together, skipping the overlapped prefix of each."""
    out = ""
    covered = 0
    for start, end in spans:
        out += text[max(start, covered):end]
        covered = max(covered, end)
    return out


class TestChunkText:
    """Test chunk_text behaviour."""

    def test_example_windows(self):
        assert chunk_text("abcdefghij", 4, 2) == ["abcd", "cdef", "efgh", "ghij"]

    def test_empty_text(self):
        assert chunk_text("", 1000, 200) == []
        assert chunk_spans("", 10, 2) == []

    def test_text_shorter_than_chunk(self):
        assert chunk_text("short", 1000, 200) == ["short"]

    def test_default_parameters(self):
        text = "x" * 2500
        chunks = chunk_text(text)
        assert [len(c) for c in chunks] == [1000, 1000, 900]
        assert chunk_spans(text) == [(0, 1000), (800, 1800), (1600, 2500)]

    def test_final_chunk_may_be_shorter(self):
        chunks = chunk_text("abcdefghijk", 4, 1)
        assert chunks == ["abcd", "defg", "ghij", "jk"]

    def test_no_overlap(self):
        assert chunk_text("abcdefgh", 3, 0) == ["abc", "def", "gh"]

    @pytest.mark.parametrize("size,overlap", [(4, 4), (4, 10), (1, 5), (3, 2)])
    def test_overlap_not_smaller_than_size_terminates(self, size, overlap):
        text = "abcdefghijklmnopqrstuvwxyz"
        spans = chunk_spans(text, size, overlap)
        starts = [s for s, _ in spans]
        assert starts == sorted(set(starts))
        assert spans[-1][1] == len(text)
        assert len(spans) <= len(text)

    def test_overlap_is_clamped_to_size_minus_one(self):
        assert chunk_text("abcdef", 3, 99) == ["abc", "bcd", "cde", "def"]

    @pytest.mark.parametrize("size", [0, -5])
    def test_degenerate_chunk_size_is_clamped(self, size):
        assert chunk_text("abc", size, 0) == ["a", "b", "c"]

    def test_negative_overlap_is_treated_as_zero(self):
        assert chunk_text("abcdef", 2, -3) == ["ab", "cd", "ef"]

    def test_chunks_never_exceed_text(self):
        text = "lorem ipsum dolor sit amet " * 40
        for start, end in chunk_spans(text, 37, 11):
            assert 0 <= start < end <= len(text)
            assert end - start <= 37

    @pytest.mark.parametrize("size,overlap", [(4, 2), (7, 3), (10, 0), (5, 9), (1000, 200)])
    def test_coverage_reconstructs_text(self, size, overlap):
        text = "The quick brown fox jumps over the lazy dog. " * 30
        spans = chunk_spans(text, size, overlap)
        assert _reconstruct(text, spans) == text

    def test_idempotent(self):
        text = "Some document text that is chunked twice. " * 20
        assert chunk_text(text, 50, 10) == chunk_text(text, 50, 10)

    def test_iteration_ceiling_stops_loop(self, monkeypatch):
        monkeypatch.setattr(chunking, "ITERATION_SLACK", -3)
        # 20 chars, step 2 -> 9 windows needed, ceiling is 7
        spans = chunk_spans("a" * 20, 4, 2)
        assert len(spans) == 7
