"""
Media insertion into a single paragraph Block.
"""

import html
import logging
from typing import Optional

from .config import ConversionConfig, DEFAULT_CONFIG, derive_attribution, markdown_alt_text
from .exceptions import ValidationError
from .media import fit_to_width, probe_image_size
from .models import Block, Document, Format, MediaReference
from .segmenter import make_label

logger = logging.getLogger('blogmark')


class InsertionPlanner:
    """Appends one image fragment to the end of one selected Block.

    All other Blocks pass through textually identical and in order. The
    fragment stays trailing content of the selected Block until the next
    segmentation pass splits it off at its padding blank line.
    """

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def plan(self, blocks, block_index, media_ref: MediaReference, fmt) -> Document:
        """
        Insert a media fragment and reassemble the document.

        Args:
            blocks: Current Blocks, as returned by ParagraphSegmenter.segment
            block_index: 0-based index of the target Block
            media_ref: The selected MediaReference
            fmt: Format of the document the Blocks came from

        Returns:
            A new Document in the same format.

        Raises:
            ValidationError: If the index is out of range or the address is empty.
        """
        fmt = Format.parse(fmt)
        updated = self.insert(blocks, block_index, media_ref, fmt)
        text = self.config.PARAGRAPH_SEPARATOR.join(block.text for block in updated)
        return Document(text=text, format=fmt)

    def insert(self, blocks, block_index, media_ref: MediaReference, fmt) -> list[Block]:
        """Return a new Block list with the fragment appended to ``block_index``."""
        blocks = list(blocks)
        self._validate(blocks, block_index, media_ref)

        separator = self.config.PARAGRAPH_SEPARATOR
        fragment = separator + self.build_fragment(media_ref, fmt) + separator
        target = blocks[block_index]
        text = target.text + fragment

        logger.debug("Inserting image into block %d: %s", block_index, media_ref.address)
        blocks[block_index] = Block(
            index=target.index,
            text=text,
            label=make_label(target.index, text, self.config),
        )
        return blocks

    def build_fragment(self, media_ref: MediaReference, fmt) -> str:
        """Build the format-correct image fragment, without padding."""
        address = media_ref.address.strip()
        attribution = media_ref.attribution or ''

        if Format.parse(fmt) is Format.MARKDOWN:
            return f"![{markdown_alt_text(attribution)}]({address})"

        attrs = [
            ('src', address),
            ('alt', attribution),
            (self.config.ATTRIBUTION_ATTRIBUTE, derive_attribution(attribution, self.config)),
        ]
        width, height = self._dimensions(media_ref)
        if width:
            attrs.append(('width', str(width)))
        if height:
            attrs.append(('height', str(height)))
        attrs.append(('style', self.config.IMAGE_STYLE))

        rendered = ' '.join(f'{name}="{html.escape(value, quote=True)}"' for name, value in attrs)
        return f"<img {rendered} />"

    def _dimensions(self, media_ref):
        width, height = media_ref.width, media_ref.height
        if width is None:
            size = probe_image_size(media_ref.address)
            if size:
                width, height = size
        return fit_to_width(width, height, self.config.IMAGE_MAX_WIDTH_PX)

    def _validate(self, blocks, block_index, media_ref):
        if block_index is None:
            raise ValidationError("No target block selected")
        if isinstance(block_index, bool) or not isinstance(block_index, int):
            raise ValidationError(f"Block index must be an integer, got {block_index!r}")
        if not 0 <= block_index < len(blocks):
            raise ValidationError(
                f"Block index {block_index} out of range (document has {len(blocks)} blocks)"
            )
        if media_ref is None or not (media_ref.address or '').strip():
            raise ValidationError("Media address must not be empty")
