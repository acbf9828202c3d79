"""
CostumeSwitch input parsers.

Supported formats:
- EPUB (.epub)
- Plain text (.txt)
- Markdown (.md)

Every parser yields Passages: one per paragraph, in reading order.
"""

from pathlib import Path

from costumeswitch.models import Passage
from costumeswitch.parser.epub import parse_epub
from costumeswitch.parser.text import parse_text, split_passages


def parse_source(path: str | Path) -> tuple[dict, list[Passage]]:
    """Parse a file by extension (EPUB, otherwise text)."""
    path = Path(path)
    if path.suffix.lower() == ".epub":
        return parse_epub(path)
    return parse_text(path)


__all__ = ["parse_epub", "parse_source", "parse_text", "split_passages"]
