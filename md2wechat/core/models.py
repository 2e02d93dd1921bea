"""Typed Markdown nodes handed to the render rules."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union


class NodeKind(str, Enum):
    """node kinds that carry their own styling rule."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK = "code_block"
    INLINE_CODE = "inline_code"
    STRONG = "strong"
    LIST = "list"
    LIST_ITEM = "list_item"
    IMAGE = "image"
    LINK = "link"
    HORIZONTAL_RULE = "horizontal_rule"


# content fields below hold HTML already rendered from the node's children;
# code and text fields hold raw, unescaped source text


@dataclass(frozen=True)
class Heading:
    """ATX or setext heading."""

    kind: ClassVar[NodeKind] = NodeKind.HEADING
    level: int
    content: str


@dataclass(frozen=True)
class Paragraph:
    """Paragraph; hidden paragraphs belong to tight list items."""

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH
    content: str
    hidden: bool = False


@dataclass(frozen=True)
class Blockquote:
    kind: ClassVar[NodeKind] = NodeKind.BLOCKQUOTE
    content: str


@dataclass(frozen=True)
class CodeBlock:
    """Fenced or indented code block."""

    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK
    code: str
    language: Optional[str] = None


@dataclass(frozen=True)
class InlineCode:
    kind: ClassVar[NodeKind] = NodeKind.INLINE_CODE
    text: str


@dataclass(frozen=True)
class Strong:
    kind: ClassVar[NodeKind] = NodeKind.STRONG
    content: str


@dataclass(frozen=True)
class ListBlock:
    """Ordered or bullet list; items are rendered list items."""

    kind: ClassVar[NodeKind] = NodeKind.LIST
    ordered: bool
    items: str
    start: int = 1


@dataclass(frozen=True)
class ListItem:
    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM
    content: str


@dataclass(frozen=True)
class Image:
    kind: ClassVar[NodeKind] = NodeKind.IMAGE
    url: str
    alt: str
    title: Optional[str] = None


@dataclass(frozen=True)
class Link:
    kind: ClassVar[NodeKind] = NodeKind.LINK
    url: str
    content: str
    title: Optional[str] = None


@dataclass(frozen=True)
class HorizontalRule:
    kind: ClassVar[NodeKind] = NodeKind.HORIZONTAL_RULE


Node = Union[
    Heading,
    Paragraph,
    Blockquote,
    CodeBlock,
    InlineCode,
    Strong,
    ListBlock,
    ListItem,
    Image,
    Link,
    HorizontalRule,
]
