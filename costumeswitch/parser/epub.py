"""
EPUB parser for CostumeSwitch.

Reads EPUB documents in spine order using ebooklib and converts each
document's HTML into paragraph passages.
"""

import logging
import re
from html.parser import HTMLParser
from pathlib import Path
from typing import Optional

from costumeswitch.models import Passage

logger = logging.getLogger("costumeswitch.parser")


class ParagraphExtractor(HTMLParser):
    """
    Collect paragraphs and the first heading from an HTML document.

    Block elements close the current paragraph; inline elements are
    joined into it, so markup inside a word (Bob<i>'s</i>) stays intact.
    """

    BLOCK_TAGS = {
        "p", "div", "li", "tr", "blockquote", "pre", "br", "hr",
        "section", "article",
    }
    HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
    SKIP_TAGS = {"script", "style", "head", "meta", "link", "nav", "footer"}

    def __init__(self):
        super().__init__()
        self.paragraphs: list[str] = []
        self.title: Optional[str] = None
        self.skip_depth = 0
        self._buffer: list[str] = []
        self._in_heading = False

    def _flush(self) -> None:
        text = " ".join("".join(self._buffer).split())
        self._buffer = []
        if not text:
            return
        if self._in_heading:
            if self.title is None:
                self.title = text
        else:
            self.paragraphs.append(text)

    def handle_starttag(self, tag: str, attrs: list) -> None:
        tag = tag.lower()
        if tag in self.SKIP_TAGS:
            self.skip_depth += 1
        elif tag in self.HEADING_TAGS:
            self._flush()
            self._in_heading = True
        elif tag in self.BLOCK_TAGS:
            self._flush()

    def handle_endtag(self, tag: str) -> None:
        tag = tag.lower()
        if tag in self.SKIP_TAGS:
            self.skip_depth = max(0, self.skip_depth - 1)
        elif tag in self.HEADING_TAGS:
            self._flush()
            self._in_heading = False
        elif tag in self.BLOCK_TAGS:
            self._flush()

    def handle_data(self, data: str) -> None:
        if self.skip_depth > 0:
            return
        self._buffer.append(data)

    def close(self) -> None:
        super().close()
        self._flush()


def html_to_paragraphs(html_content: str) -> tuple[Optional[str], list[str]]:
    """
    Convert HTML to (title, paragraphs).

    The title is the first heading's text, if any.
    """
    extractor = ParagraphExtractor()
    extractor.feed(html_content)
    extractor.close()
    return extractor.title, extractor.paragraphs


def _decode(content) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def parse_epub(path: str | Path) -> tuple[dict, list[Passage]]:
    """
    Parse an EPUB file into passages.

    Returns:
        Tuple of (metadata dict, list of Passages)

    Raises:
        ImportError: If ebooklib is not installed
        FileNotFoundError: If file doesn't exist
    """
    try:
        import ebooklib
        from ebooklib import epub
    except ImportError:
        raise ImportError(
            "ebooklib is required for EPUB parsing. "
            "Install with: pip install ebooklib"
        )

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"EPUB not found: {path}")

    book = epub.read_epub(str(path))

    metadata = {}
    for key in ("title", "creator", "language"):
        values = book.get_metadata("DC", key)
        if values:
            metadata["author" if key == "creator" else key] = values[0][0]

    documents = []
    for spine_item in book.spine:
        item_id = spine_item[0] if isinstance(spine_item, tuple) else spine_item
        item = book.get_item_with_id(item_id)
        if item is not None and item.get_type() == ebooklib.ITEM_DOCUMENT:
            documents.append(item)
    if not documents:
        documents = list(book.get_items_of_type(ebooklib.ITEM_DOCUMENT))

    passages: list[Passage] = []
    for item in documents:
        title, paragraphs = html_to_paragraphs(_decode(item.get_content()))
        if not paragraphs:
            logger.debug(f"Skipping empty document: {item.get_name()}")
            continue
        for paragraph in paragraphs:
            passages.append(Passage(
                index=len(passages),
                text=paragraph,
                title=title,
                source_file=item.get_name(),
            ))

    logger.info(f"Parsed {path.name}: {len(documents)} documents, {len(passages)} passages")
    return metadata, passages
