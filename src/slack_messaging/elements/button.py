"""ボタン要素"""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field

from slack_messaging.composition import ConfirmationDialog, PlainText, to_plain_text
from slack_messaging.validation import BlockKitModel, Builder, text_length


class ButtonStyle(StrEnum):
    """ボタンの配色（未指定ならデフォルト）"""

    PRIMARY = "primary"
    DANGER = "danger"


class Button(BlockKitModel):
    """ボタン

    textはplain_textのみ。mrkdwnを渡すと構築時にエラーになる。
    """

    type: Literal["button"] = "button"
    text: Annotated[PlainText, text_length(75)]
    action_id: Annotated[str, Field(max_length=255)] | None = None
    url: Annotated[str, Field(max_length=3000)] | None = None
    value: Annotated[str, Field(max_length=2000)] | None = None
    style: ButtonStyle | None = None
    confirm: ConfirmationDialog | None = None
    accessibility_label: Annotated[str, Field(max_length=75)] | None = None

    @classmethod
    def builder(cls) -> "ButtonBuilder":
        return ButtonBuilder()


class ButtonBuilder(Builder[Button]):
    model = Button

    def text(self, text: str | PlainText) -> "ButtonBuilder":
        return self._set("text", to_plain_text(text))

    def action_id(self, action_id: str | None) -> "ButtonBuilder":
        return self._set("action_id", action_id)

    def url(self, url: str | None) -> "ButtonBuilder":
        return self._set("url", url)

    def value(self, value: str | None) -> "ButtonBuilder":
        return self._set("value", value)

    def style(self, style: ButtonStyle | None) -> "ButtonBuilder":
        return self._set("style", style)

    def primary(self) -> "ButtonBuilder":
        return self.style(ButtonStyle.PRIMARY)

    def danger(self) -> "ButtonBuilder":
        return self.style(ButtonStyle.DANGER)

    def confirm(self, confirm: ConfirmationDialog | None) -> "ButtonBuilder":
        return self._set("confirm", confirm)

    def accessibility_label(self, label: str | None) -> "ButtonBuilder":
        return self._set("accessibility_label", label)
