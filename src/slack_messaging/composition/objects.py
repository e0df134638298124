"""コンポジションオブジェクト（option, option group, confirm dialog, conversation filter）"""

from enum import StrEnum
from typing import Annotated

from pydantic import Field

from slack_messaging.composition.text import MrkdwnText, PlainText, Text, to_plain_text
from slack_messaging.validation import BlockKitModel, Builder, item_count, text_length


class Option(BlockKitModel):
    """選択肢

    セレクトメニュー・overflowメニューではtextはplain_textのみ、
    チェックボックス・ラジオボタンではmrkdwnも使える。
    """

    text: Annotated[Text, text_length(75)]
    value: Annotated[str, Field(min_length=1, max_length=150)]
    description: Annotated[Text, text_length(75)] | None = None
    url: Annotated[str, Field(max_length=3000)] | None = None


def option(
    text: str | PlainText | MrkdwnText,
    value: str,
    description: str | PlainText | MrkdwnText | None = None,
) -> Option:
    """plain_textの選択肢を作る"""
    if isinstance(description, str):
        description = PlainText(text=description)
    return Option(text=to_plain_text(text), value=value, description=description)


class OptionGroup(BlockKitModel):
    """選択肢のグループ"""

    label: Annotated[PlainText, text_length(75)]
    options: Annotated[tuple[Option, ...], item_count(100, empty="empty_options")]


class ConfirmStyle(StrEnum):
    PRIMARY = "primary"
    DANGER = "danger"


class ConfirmationDialog(BlockKitModel):
    """確認ダイアログ"""

    title: Annotated[PlainText, text_length(100)]
    text: Annotated[PlainText, text_length(300)]
    confirm: Annotated[PlainText, text_length(30)]
    deny: Annotated[PlainText, text_length(30)]
    style: ConfirmStyle | None = None

    @classmethod
    def builder(cls) -> "ConfirmationDialogBuilder":
        return ConfirmationDialogBuilder()


class ConfirmationDialogBuilder(Builder[ConfirmationDialog]):
    model = ConfirmationDialog

    def title(self, title: str | PlainText) -> "ConfirmationDialogBuilder":
        return self._set("title", to_plain_text(title))

    def text(self, text: str | PlainText) -> "ConfirmationDialogBuilder":
        return self._set("text", to_plain_text(text))

    def confirm(self, confirm: str | PlainText) -> "ConfirmationDialogBuilder":
        return self._set("confirm", to_plain_text(confirm))

    def deny(self, deny: str | PlainText) -> "ConfirmationDialogBuilder":
        return self._set("deny", to_plain_text(deny))

    def style(self, style: ConfirmStyle | None) -> "ConfirmationDialogBuilder":
        return self._set("style", style)

    def primary(self) -> "ConfirmationDialogBuilder":
        return self.style(ConfirmStyle.PRIMARY)

    def danger(self) -> "ConfirmationDialogBuilder":
        return self.style(ConfirmStyle.DANGER)


class ConversationType(StrEnum):
    IM = "im"
    MPIM = "mpim"
    PRIVATE = "private"
    PUBLIC = "public"


class ConversationFilter(BlockKitModel):
    """conversationsセレクトメニューに表示する会話の絞り込み条件"""

    include: Annotated[tuple[ConversationType, ...], item_count(4)] | None = None
    exclude_external_shared_channels: bool | None = None
    exclude_bot_users: bool | None = None
