"""Content chunker for splitting long text into pages."""

from dataclasses import dataclass

from .page import Embed, Page


@dataclass
class ContentChunker:
    """Splits long text into page-sized chunks and builds pages from them."""

    max_size: int = 1000

    # Room for the longest indicator we emit: " [999/999]"
    INDICATOR_RESERVE = 10

    def chunk(self, content: str) -> list[str]:
        """
        Split content into chunks that fit within max_size.

        Single-chunk content gets no page indicator; otherwise each chunk
        ends with [n/total].

        Args:
            content: The content to split.

        Returns:
            List of chunks, each <= max_size characters.
        """
        content = content.strip()
        if not content:
            return []

        if len(content) <= self.max_size:
            return [content]

        chunks = self._split(content, self.max_size - self.INDICATOR_RESERVE)
        total = len(chunks)
        return [f"{chunk} [{i}/{total}]" for i, chunk in enumerate(chunks, 1)]

    def to_pages(self, content: str) -> list[Page]:
        """Build text pages from content."""
        return [Page(content=chunk) for chunk in self.chunk(content)]

    def to_embed_pages(self, content: str, title: str | None = None) -> list[Page]:
        """
        Build embed pages from content.

        The page position goes in each embed's footer instead of the text.
        """
        chunks = self._split(content, self.max_size)
        total = len(chunks)
        return [
            Page(embed=Embed(title=title, description=chunk, footer=f"Page {i}/{total}"))
            for i, chunk in enumerate(chunks, 1)
        ]

    def _split(self, content: str, limit: int) -> list[str]:
        """Split content into raw chunks, preferring word boundaries."""
        if limit <= 0:
            raise ValueError(f"max_size must be > {self.INDICATOR_RESERVE}")

        remaining = content.strip()
        chunks = []

        while remaining:
            if len(remaining) <= limit:
                chunks.append(remaining)
                break

            split_point = self._find_split_point(remaining, limit)
            chunks.append(remaining[:split_point].rstrip())
            remaining = remaining[split_point:].lstrip()

        return chunks

    def _find_split_point(self, text: str, max_len: int) -> int:
        """
        Find the best point to split text at or before max_len.

        Prefers a newline, then a space, in the second half of the window;
        otherwise splits hard at max_len.
        """
        window = text[:max_len]

        last_newline = window.rfind("\n")
        if last_newline > max_len // 2:
            return last_newline + 1

        last_space = window.rfind(" ")
        if last_space > max_len // 2:
            return last_space + 1

        return max_len
