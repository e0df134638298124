"""テキストオブジェクトとコンポジションオブジェクト"""

from slack_messaging.composition.objects import (
    ConfirmationDialog,
    ConfirmationDialogBuilder,
    ConfirmStyle,
    ConversationFilter,
    ConversationType,
    Option,
    OptionGroup,
    option,
)
from slack_messaging.composition.text import MrkdwnText, PlainText, Text, mrkdwn, plain_text, to_plain_text

__all__ = [
    "ConfirmStyle",
    "ConfirmationDialog",
    "ConfirmationDialogBuilder",
    "ConversationFilter",
    "ConversationType",
    "MrkdwnText",
    "Option",
    "OptionGroup",
    "PlainText",
    "Text",
    "mrkdwn",
    "option",
    "plain_text",
    "to_plain_text",
]
