"""
YAML front matter handling using python-frontmatter.

Drafts saved to disk may carry front matter such as::

    ---
    title: 부동산 시장 전망
    keyword: 부동산 시장
    ---
"""

import frontmatter

# Metadata keys that can label inserted images, in priority order
HINT_KEYS = ('keyword', 'title')


def parse_markdown_string_with_frontmatter(markdown_text: str) -> tuple[dict, str]:
    """
    Parse a Markdown string with YAML front matter.

    Args:
        markdown_text: Markdown content as string

    Returns:
        (metadata_dict, markdown_content_without_frontmatter)
    """
    post = frontmatter.loads(markdown_text)
    return dict(post.metadata), post.content


def attribution_hint_from_metadata(metadata: dict):
    """Return the first non-empty hint-bearing metadata value, or None."""
    for key in HINT_KEYS:
        value = metadata.get(key)
        if isinstance(value, list):
            value = ' '.join(str(v) for v in value)
        if value is not None and str(value).strip():
            return str(value).strip()
    return None


def dump_markdown_with_frontmatter(markdown_text: str, metadata: dict) -> str:
    """Render Markdown content with its metadata as YAML front matter."""
    if not metadata:
        return markdown_text
    post = frontmatter.Post(markdown_text)
    post.metadata.update(metadata)
    return frontmatter.dumps(post)
