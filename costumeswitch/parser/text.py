"""
Text/Markdown parser for CostumeSwitch.

Splits plain text into paragraph passages. Paragraphs are separated by
blank lines; a Markdown heading line ("# Title") is not a passage but
becomes the title of the passages that follow it.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from costumeswitch.models import Passage

logger = logging.getLogger("costumeswitch.parser")

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
HEADING = re.compile(r"^#{1,6}\s+(.+?)\s*#*\s*$")


def split_passages(
    text: str,
    source_file: Optional[str] = None,
) -> list[Passage]:
    """
    Split text into paragraph passages.

    Args:
        text: Full text content
        source_file: Recorded on every passage

    Returns:
        Non-empty passages, indexed from 0
    """
    passages: list[Passage] = []
    title = None

    for block in PARAGRAPH_BREAK.split(text.replace("\r\n", "\n")):
        lines = []
        for line in block.split("\n"):
            heading = HEADING.match(line.strip())
            if heading:
                title = heading.group(1)
                continue
            lines.append(line)

        content = "\n".join(lines).strip()
        if not content:
            continue
        passages.append(Passage(
            index=len(passages),
            text=content,
            title=title,
            source_file=source_file,
        ))

    return passages


def parse_text(path: str | Path) -> tuple[dict, list[Passage]]:
    """
    Parse a text or Markdown file into passages.

    Returns:
        Tuple of (metadata dict, list of Passages)

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    passages = split_passages(text, source_file=str(path))
    logger.info(f"Parsed {path.name}: {len(passages)} passages")
    return {"title": path.stem}, passages
