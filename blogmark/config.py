"""
Configuration constants for blogmark.

This module centralizes the magic strings and numbers used by the markup
converter, the paragraph segmenter and the insertion planner. Components take
an optional ``config`` argument; pass a ConversionConfig subclass or instance
with overridden attributes to change them.
"""


class ConversionConfig:
    """Default configuration values for conversion and insertion."""

    # === Paragraphs ===
    PARAGRAPH_SEPARATOR = '\n\n'
    SOFT_BREAK = '<br />'  # Joins lines of one HTML paragraph
    MAX_BLANK_LINE_RUN = 2  # Runs longer than this collapse to a single blank line

    # === Block Labels ===
    LABEL_PREVIEW_LENGTH = 80  # Was 50 in the first picker
    LABEL_ELLIPSIS = '...'
    EMPTY_LABEL_TEMPLATE = 'Paragraph {number}'

    # === Image Attribution ===
    DEFAULT_ATTRIBUTION = 'image'
    ATTRIBUTION_TOKEN_COUNT = 2
    ATTRIBUTION_ATTRIBUTE = 'data-ai-hint'

    # Only these sources turn ![alt](src) into an <img> element
    IMAGE_SOURCE_PREFIXES = ('data:image', 'http')

    # === Inserted Image Element ===
    IMAGE_STYLE = (
        'max-width: 100%; height: auto; border-radius: 0.5rem; '
        'box-shadow: 0 4px 6px rgba(0,0,0,0.1);'
    )
    IMAGE_MAX_WIDTH_PX = 600

    # === Security Limits ===
    MAX_INPUT_FILE_SIZE = 5 * 1024 * 1024  # 5 MB max input document


# Global default config instance
DEFAULT_CONFIG = ConversionConfig()


def derive_attribution(hint, config=None):
    """Return the short attribution used for ``data-ai-hint`` attributes.

    The first ``ATTRIBUTION_TOKEN_COUNT`` whitespace-separated tokens of
    ``hint``, or ``DEFAULT_ATTRIBUTION`` when the hint is missing or blank.

    >>> derive_attribution("부동산 시장 전망 2025")
    '부동산 시장'
    >>> derive_attribution("  ")
    'image'
    """
    config = config or DEFAULT_CONFIG
    tokens = (hint or '').split()
    if not tokens:
        return config.DEFAULT_ATTRIBUTION
    return ' '.join(tokens[:config.ATTRIBUTION_TOKEN_COUNT])


def markdown_alt_text(alt):
    """Return ``alt`` made safe for the ``![alt](src)`` image form.

    Brackets would end the alt text early, so they are removed, and line
    breaks collapse to single spaces.

    >>> markdown_alt_text("sunset [2024]")
    'sunset 2024'
    """
    return ' '.join((alt or '').replace('[', '').replace(']', '').split())
