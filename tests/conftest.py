"""
Pytest fixtures and configuration for blogmark tests.
"""

import base64
import io
from pathlib import Path

import pytest
from PIL import Image

from blogmark import Document, Format, MediaReference, ParagraphSegmenter


SAMPLE_DRAFT = """# 부동산 시장 전망

올해 **부동산 시장**은 금리 변화에 따라 *크게* 흔들렸습니다.
전문가들은 [한국부동산원](https://www.reb.or.kr) 자료를 인용합니다.

## 주요 변수

정부 정책과 __공급 물량__이 핵심 변수로 꼽힙니다.

![아파트 단지](https://img.example/apartments.png)"""


@pytest.fixture
def sample_draft() -> str:
    """A generated Korean blog draft in Markdown."""
    return SAMPLE_DRAFT


@pytest.fixture
def three_paragraphs() -> Document:
    """A Markdown document with three plain paragraphs."""
    return Document(text="첫 단락입니다.\n\n둘째 단락입니다.\n\n셋째 단락입니다.", format=Format.MARKDOWN)


@pytest.fixture
def three_blocks(three_paragraphs: Document):
    """Blocks of the three-paragraph document."""
    return ParagraphSegmenter().segment(three_paragraphs.text)


@pytest.fixture
def sunset() -> MediaReference:
    """A remote image reference."""
    return MediaReference(address="https://img.example/a.png", attribution="sunset")


@pytest.fixture
def png_data_uri() -> str:
    """A 40x30 PNG encoded as a data URI."""
    buffer = io.BytesIO()
    Image.new("RGB", (40, 30), color=(200, 120, 40)).save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"


@pytest.fixture
def draft_with_frontmatter(tmp_path: Path) -> Path:
    """A Markdown draft file with YAML front matter."""
    md_path = tmp_path / "draft.md"
    md_path.write_text(
        "---\n"
        "title: 부동산 시장 전망\n"
        "keyword: 부동산 시장 동향\n"
        "---\n"
        "# 부동산 시장 전망\n"
        "\n"
        "금리가 **핵심**입니다.\n"
        "\n"
        "![단지](https://img.example/apartments.png)\n",
        encoding="utf-8",
    )
    return md_path
