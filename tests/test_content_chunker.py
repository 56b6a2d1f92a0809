"""Tests for the ContentChunker module."""

import pytest
from button_pager.core.content_chunker import ContentChunker


class TestContentChunker:
    """Tests for ContentChunker."""

    @pytest.fixture
    def chunker(self):
        """Create a ContentChunker with default max_size."""
        return ContentChunker()

    @pytest.fixture
    def small_chunker(self):
        """Create a ContentChunker with smaller size for testing."""
        return ContentChunker(max_size=50)

    def test_short_content_single_chunk(self, chunker):
        """Short content returns a single chunk without page indicator."""
        assert chunker.chunk("Hello world") == ["Hello world"]

    def test_empty_content_returns_empty_list(self, chunker):
        """Empty and whitespace-only content return no chunks."""
        assert chunker.chunk("") == []
        assert chunker.chunk("   \n  \t  ") == []

    def test_exact_max_size_single_chunk(self, small_chunker):
        """Content exactly at max_size is single chunk without indicator."""
        content = "A" * 50
        assert small_chunker.chunk(content) == [content]

    def test_page_indicators_correct_format(self, small_chunker):
        """Page indicators have correct format [n/total]."""
        chunks = small_chunker.chunk("A" * 150)
        total = len(chunks)
        assert total > 1
        for i, chunk in enumerate(chunks, 1):
            assert chunk.endswith(f"[{i}/{total}]")

    def test_chunks_respect_max_size(self, small_chunker):
        """Each chunk respects the max_size limit."""
        content = "word " * 100
        for chunk in small_chunker.chunk(content):
            assert len(chunk) <= 50

    def test_splits_at_word_boundaries(self, small_chunker):
        """Chunks break between words when possible."""
        content = " ".join(["alpha", "beta", "gamma", "delta"] * 6)
        for chunk in small_chunker.chunk(content):
            text = chunk.rsplit(" [", 1)[0]
            assert text.split()[-1] in {"alpha", "beta", "gamma", "delta"}

    def test_too_small_max_size_raises(self):
        """A max_size with no room for text next to the indicator fails."""
        with pytest.raises(ValueError):
            ContentChunker(max_size=10).chunk("A" * 50)

    def test_to_pages(self, small_chunker):
        """to_pages wraps each chunk in a text page."""
        pages = small_chunker.to_pages("A" * 120)
        assert len(pages) > 1
        assert all(page.embed is None for page in pages)
        assert pages[0].content.endswith(f"[1/{len(pages)}]")

    def test_to_embed_pages(self, small_chunker):
        """to_embed_pages puts the position in each embed's footer."""
        pages = small_chunker.to_embed_pages("A" * 120, title="notes.txt")
        total = len(pages)
        assert total > 1
        for i, page in enumerate(pages, 1):
            assert page.embed.title == "notes.txt"
            assert page.embed.footer == f"Page {i}/{total}"
            assert "[" not in page.embed.description

    def test_to_pages_empty(self, chunker):
        """Empty content yields no pages."""
        assert chunker.to_pages("") == []
        assert chunker.to_embed_pages("") == []
