"""レイアウトブロック"""

from typing import Annotated

from pydantic import Field

from slack_messaging.blocks.actions import ActionsBlock, ActionsBlockBuilder
from slack_messaging.blocks.context import ContextBlock, ContextBlockBuilder, ContextElement
from slack_messaging.blocks.display import (
    DividerBlock,
    HeaderBlock,
    HeaderBlockBuilder,
    ImageBlock,
    ImageBlockBuilder,
    MarkdownBlock,
)
from slack_messaging.blocks.input import InputBlock, InputBlockBuilder
from slack_messaging.blocks.rich_text import (
    BroadcastRange,
    RichTextBlock,
    RichTextBlockBuilder,
    RichTextBroadcast,
    RichTextChannel,
    RichTextColor,
    RichTextDate,
    RichTextEmoji,
    RichTextLink,
    RichTextList,
    RichTextListStyle,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    RichTextStyle,
    RichTextText,
    RichTextUser,
    RichTextUsergroup,
)
from slack_messaging.blocks.section import SectionBlock, SectionBlockBuilder

Block = Annotated[
    ActionsBlock
    | ContextBlock
    | DividerBlock
    | HeaderBlock
    | ImageBlock
    | InputBlock
    | MarkdownBlock
    | RichTextBlock
    | SectionBlock,
    Field(discriminator="type"),
]

__all__ = [
    "ActionsBlock",
    "ActionsBlockBuilder",
    "Block",
    "BroadcastRange",
    "ContextBlock",
    "ContextBlockBuilder",
    "ContextElement",
    "DividerBlock",
    "HeaderBlock",
    "HeaderBlockBuilder",
    "ImageBlock",
    "ImageBlockBuilder",
    "InputBlock",
    "InputBlockBuilder",
    "MarkdownBlock",
    "RichTextBlock",
    "RichTextBlockBuilder",
    "RichTextBroadcast",
    "RichTextChannel",
    "RichTextColor",
    "RichTextDate",
    "RichTextEmoji",
    "RichTextLink",
    "RichTextList",
    "RichTextListStyle",
    "RichTextPreformatted",
    "RichTextQuote",
    "RichTextSection",
    "RichTextStyle",
    "RichTextText",
    "RichTextUser",
    "RichTextUsergroup",
    "SectionBlock",
    "SectionBlockBuilder",
]
