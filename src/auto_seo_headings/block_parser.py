"""
Content loading for Auto SEO Headings.

Turns post content into ContentBlock objects. Two formats are accepted:
- Block-serialized content, where each block is delimited by HTML comments
  such as <!-- wp:paragraph --> ... <!-- /wp:paragraph -->
- Plain HTML, where top-level <p> and <h1>-<h6> elements become blocks

Only top-level blocks are produced. Nested blocks stay inside their
parent's markup, as the editor treats them as part of the parent.
"""

import json
import logging
import re
from typing import Iterable, Optional

from bs4 import BeautifulSoup, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction

from .models import HEADING_BLOCK_NAME, PARAGRAPH_BLOCK_NAME, BlockKind, ContentBlock

logger = logging.getLogger(__name__)

# Opening, closing and self-closing block delimiters
BLOCK_DELIMITER = re.compile(
    r"<!--\s+(?P<closer>/)?wp:(?P<name>[a-z][a-z0-9_-]*(?:/[a-z][a-z0-9_-]*)?)"
    r"\s+(?P<attrs>\{.*?\}\s+)?(?P<void>/)?-->",
    re.DOTALL,
)

DEFAULT_NAMESPACE = "core/"
DEFAULT_HEADING_LEVEL = 2

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

# Sequences that could end or confuse the delimiter comment
ATTRS_ESCAPES = [
    ("--", "\\u002d\\u002d"),
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\\\"", "\\u0022"),
]


class BlockParseError(Exception):
    """Raised when block delimiters carry unreadable attributes."""
    pass


def _full_block_name(name: str) -> str:
    """Add the default namespace to bare block names."""
    return name if "/" in name else DEFAULT_NAMESPACE + name


def _parse_attrs(raw: Optional[str], name: str) -> dict:
    """Decode the JSON attributes of a block delimiter."""
    if not raw:
        return {}
    try:
        attrs = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BlockParseError(f"Invalid attributes for block '{name}': {e}") from e
    if not isinstance(attrs, dict):
        raise BlockParseError(f"Attributes for block '{name}' must be a JSON object")
    return attrs


def _heading_level(attrs: dict, name: str) -> int:
    """Read the level attribute of a heading block."""
    level = attrs.get("level", DEFAULT_HEADING_LEVEL)
    if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= 6:
        raise BlockParseError(f"Invalid heading level for block '{name}': {level!r}")
    return level


def _make_block(name: str, attrs: dict, inner: str) -> ContentBlock:
    """Create a ContentBlock from a parsed delimiter pair."""
    if name == PARAGRAPH_BLOCK_NAME:
        return ContentBlock(kind=BlockKind.PARAGRAPH, raw_markup=inner, name=name, attrs=attrs)
    if name == HEADING_BLOCK_NAME:
        return ContentBlock(
            kind=BlockKind.HEADING,
            raw_markup=inner,
            current_level=_heading_level(attrs, name),
            name=name,
            attrs=attrs,
        )
    return ContentBlock(kind=BlockKind.OTHER, raw_markup=inner, name=name, attrs=attrs)


def _freeform(markup: str) -> Optional[ContentBlock]:
    """Wrap non-blank markup found outside any delimiter."""
    if not markup.strip():
        return None
    return ContentBlock.other(markup)


def has_block_delimiters(content: str) -> bool:
    """Check if content uses block-comment serialization."""
    return bool(content) and BLOCK_DELIMITER.search(content) is not None


def parse_blocks(content: str) -> list[ContentBlock]:
    """
    Parse block-serialized content into top-level blocks.

    Args:
        content: Serialized post content.

    Returns:
        Top-level blocks in document order. Markup between blocks becomes
        an OTHER block without a name.

    Raises:
        BlockParseError: If a top-level delimiter has invalid attributes.
    """
    blocks: list[ContentBlock] = []
    if not content:
        return blocks

    depth = 0
    cursor = 0  # end of the last consumed top-level block
    opener = None  # (name, attrs, inner_start) of the open top-level block

    for match in BLOCK_DELIMITER.finditer(content):
        name = _full_block_name(match.group("name"))

        if match.group("closer"):
            if depth == 0:
                # Stray closer: left as freeform text
                logger.debug(f"Ignoring unmatched closing delimiter for '{name}'")
                continue
            depth -= 1
            if depth == 0:
                open_name, attrs, inner_start = opener
                if open_name != name:
                    logger.debug(f"Block '{open_name}' closed by '{name}'")
                blocks.append(_make_block(open_name, attrs, content[inner_start:match.start()]))
                cursor = match.end()
                opener = None
            continue

        if depth > 0:
            # Nested block: part of the parent's markup
            if not match.group("void"):
                depth += 1
            continue

        freeform = _freeform(content[cursor:match.start()])
        if freeform:
            blocks.append(freeform)

        attrs = _parse_attrs(match.group("attrs"), name)
        if match.group("void"):
            blocks.append(_make_block(name, attrs, ""))
            cursor = match.end()
        else:
            depth = 1
            opener = (name, attrs, match.end())

    if opener is not None:
        # Unclosed block runs to the end of the content
        open_name, attrs, inner_start = opener
        logger.debug(f"Block '{open_name}' is not closed")
        blocks.append(_make_block(open_name, attrs, content[inner_start:]))
    else:
        freeform = _freeform(content[cursor:])
        if freeform:
            blocks.append(freeform)

    logger.debug(f"Parsed {len(blocks)} top-level blocks")
    return blocks


def _element_to_block(element) -> Optional[ContentBlock]:
    """
    Convert a top-level BeautifulSoup node to a ContentBlock.

    Args:
        element: BeautifulSoup tag or string.

    Returns:
        ContentBlock or None if the node should be skipped.
    """
    if isinstance(element, (Comment, Doctype, Declaration, ProcessingInstruction)):
        return None
    if isinstance(element, NavigableString):
        return _freeform(str(element))

    tag_name = element.name.lower()
    if tag_name == "p":
        return ContentBlock.paragraph(str(element))
    if tag_name in HEADING_TAGS:
        return ContentBlock.heading(str(element), level=int(tag_name[1]))
    return ContentBlock.other(str(element))


def parse_html(content: str) -> list[ContentBlock]:
    """
    Parse plain HTML into top-level blocks.

    Args:
        content: HTML fragment or full document.

    Returns:
        One block per top-level node: paragraphs, headings, and OTHER for
        everything else.
    """
    if not content or not content.strip():
        return []

    if re.search(r"<body[\s>]", content, re.IGNORECASE):
        soup = BeautifulSoup(content, "lxml")
        root = soup.body or soup
    else:
        root = BeautifulSoup(content, "html.parser")

    blocks = [block for block in map(_element_to_block, root.contents) if block]
    logger.debug(f"Parsed {len(blocks)} top-level HTML elements")
    return blocks


def load_blocks(content: str) -> list[ContentBlock]:
    """
    Load blocks from post content in either format.

    Args:
        content: Serialized block content or plain HTML.

    Returns:
        Top-level blocks in document order.

    Raises:
        BlockParseError: If block delimiters carry invalid attributes.
    """
    if has_block_delimiters(content):
        return parse_blocks(content)
    return parse_html(content)


def serialize_attrs(attrs: dict) -> str:
    """Encode block attributes as JSON that is safe inside an HTML comment."""
    encoded = json.dumps(attrs, ensure_ascii=False, separators=(",", ":"))
    for sequence, escape in ATTRS_ESCAPES:
        encoded = encoded.replace(sequence, escape)
    return encoded


def serialize_block(block: ContentBlock) -> str:
    """Serialize one block back to delimited markup."""
    if not block.name:
        return block.raw_markup

    name = block.name
    if name.startswith(DEFAULT_NAMESPACE):
        name = name[len(DEFAULT_NAMESPACE):]
    attrs = f" {serialize_attrs(block.attrs)}" if block.attrs else ""

    if not block.raw_markup:
        return f"<!-- wp:{name}{attrs} /-->"

    inner = block.raw_markup
    if not inner.startswith("\n"):
        inner = f"\n{inner}\n"
    return f"<!-- wp:{name}{attrs} -->{inner}<!-- /wp:{name} -->"


def serialize_blocks(blocks: Iterable[ContentBlock]) -> str:
    """
    Serialize blocks back to post content.

    Args:
        blocks: Blocks in document order.

    Returns:
        Delimited markup, blocks separated by blank lines.
    """
    return "\n\n".join(serialize_block(block) for block in blocks)
