"""Slack Block Kitメッセージを型付きで組み立て、ワイヤ形式のJSONに変換するライブラリ"""

from slack_messaging.blocks import (
    ActionsBlock,
    Block,
    ContextBlock,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    MarkdownBlock,
    RichTextBlock,
    SectionBlock,
)
from slack_messaging.composition import MrkdwnText, Option, PlainText, Text, mrkdwn, option, plain_text
from slack_messaging.date_format import DateFormatter
from slack_messaging.elements import (
    Button,
    ButtonStyle,
    DataSource,
    DatePicker,
    ImageElement,
    MultiSelectMenu,
    OverflowMenu,
    SelectMenu,
)
from slack_messaging.exceptions import (
    BlockKitError,
    BlockKitValidationError,
    ElementCountExceededError,
    EmptyOptionsError,
    EmptyTextError,
    FieldCountExceededError,
    IncompatibleDataSourceOptionsError,
)
from slack_messaging.message import Message, MessageBuilder, ResponseType

__all__ = [
    "ActionsBlock",
    "Block",
    "BlockKitError",
    "BlockKitValidationError",
    "Button",
    "ButtonStyle",
    "ContextBlock",
    "DataSource",
    "DateFormatter",
    "DatePicker",
    "DividerBlock",
    "ElementCountExceededError",
    "EmptyOptionsError",
    "EmptyTextError",
    "FieldCountExceededError",
    "HeaderBlock",
    "ImageBlock",
    "ImageElement",
    "IncompatibleDataSourceOptionsError",
    "InputBlock",
    "MarkdownBlock",
    "Message",
    "MessageBuilder",
    "MrkdwnText",
    "MultiSelectMenu",
    "Option",
    "OverflowMenu",
    "PlainText",
    "ResponseType",
    "RichTextBlock",
    "SectionBlock",
    "SelectMenu",
    "Text",
    "mrkdwn",
    "option",
    "plain_text",
]
