"""
Data models for blogmark.

Every value here is immutable: transforms return new instances instead of
patching a document in place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import ValidationError


class Format(Enum):
    """The two textual representations of a document."""
    MARKDOWN = "markdown"
    HTML = "html"

    @classmethod
    def parse(cls, value) -> "Format":
        """Resolve a Format from an instance or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        name = str(value or '').strip().lower()
        if name == 'md':
            name = 'markdown'
        for fmt in cls:
            if fmt.value == name:
                return fmt
        raise ValidationError(f"Unknown format: {value!r}")


@dataclass(frozen=True)
class Document:
    """A text buffer paired with exactly one Format."""
    text: str
    format: Format = Format.MARKDOWN

    def with_text(self, text: str) -> "Document":
        """Return a document with the same format and new text."""
        return Document(text=text, format=self.format)


@dataclass(frozen=True)
class Block:
    """An addressable paragraph of a document."""
    index: int
    text: str
    label: str


@dataclass(frozen=True)
class MediaReference:
    """One image to embed, as returned by the image-search collaborator."""
    address: str
    attribution: str = ""
    width: Optional[int] = None
    height: Optional[int] = None
