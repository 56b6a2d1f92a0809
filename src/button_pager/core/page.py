"""Page content and per-transition render results."""

from dataclasses import dataclass

from .controls import Control


@dataclass(frozen=True)
class Embed:
    """Rich content block shown under a message's text."""

    title: str | None = None
    description: str | None = None
    footer: str | None = None
    color: int | None = None


@dataclass(frozen=True)
class Page:
    """One pre-rendered page: text, an optional embed, or both."""

    content: str = ""
    embed: Embed | None = None

    def __post_init__(self):
        if not self.content and self.embed is None:
            raise ValueError("A page needs content or an embed")

    @property
    def embeds(self) -> tuple[Embed, ...]:
        """The page's embed as a (possibly empty) tuple."""
        return (self.embed,) if self.embed is not None else ()


@dataclass(frozen=True)
class RenderedPage:
    """Everything needed to push one edit: built fresh for each transition."""

    content: str
    embeds: tuple[Embed, ...]
    controls: tuple[Control, ...]

    @classmethod
    def from_page(cls, page: Page, controls: tuple[Control, ...]) -> "RenderedPage":
        """Combine a page with the current control row."""
        return cls(content=page.content, embeds=page.embeds, controls=controls)
