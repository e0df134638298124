"""overflowメニュー"""

from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from slack_messaging.composition import ConfirmationDialog, Option, PlainText
from slack_messaging.validation import BlockKitModel, Builder, item_count


class OverflowMenu(BlockKitModel):
    """overflowメニュー（選択肢は1〜5個、textはplain_textのみ）"""

    type: Literal["overflow"] = "overflow"
    action_id: Annotated[str, Field(max_length=255)] | None = None
    options: Annotated[tuple[Option, ...], item_count(5, empty="empty_options")]
    confirm: ConfirmationDialog | None = None

    @field_validator("options")
    @classmethod
    def _check_option_text(cls, value: tuple[Option, ...]) -> tuple[Option, ...]:
        if any(not isinstance(opt.text, PlainText) for opt in value):
            raise PydanticCustomError("invalid_option_text", "option text in menus must be plain_text")
        return value

    @classmethod
    def builder(cls) -> "OverflowMenuBuilder":
        return OverflowMenuBuilder()


class OverflowMenuBuilder(Builder[OverflowMenu]):
    model = OverflowMenu

    def action_id(self, action_id: str | None) -> "OverflowMenuBuilder":
        return self._set("action_id", action_id)

    def option(self, option: Option) -> "OverflowMenuBuilder":
        return self._push("options", option)

    def confirm(self, confirm: ConfirmationDialog | None) -> "OverflowMenuBuilder":
        return self._set("confirm", confirm)

    def build(self) -> OverflowMenu:
        # option()を一度も呼ばなかった場合もempty_optionsとして扱う
        self._fields.setdefault("options", [])
        return super().build()
