"""入力系の要素（テキスト入力、チェックボックス、ラジオボタン）"""

from typing import Annotated, Literal, Self

from pydantic import Field, model_validator
from pydantic_core import PydanticCustomError

from slack_messaging.composition import ConfirmationDialog, Option, PlainText, to_plain_text
from slack_messaging.validation import BlockKitModel, Builder, item_count, text_length


class PlainTextInput(BlockKitModel):
    """1行または複数行のテキスト入力"""

    type: Literal["plain_text_input"] = "plain_text_input"
    action_id: Annotated[str, Field(max_length=255)] | None = None
    initial_value: str | None = None
    multiline: bool | None = None
    min_length: Annotated[int, Field(ge=0, le=3000)] | None = None
    max_length: Annotated[int, Field(ge=1)] | None = None
    focus_on_load: bool | None = None
    placeholder: Annotated[PlainText, text_length(150)] | None = None

    @model_validator(mode="after")
    def _check_length_range(self) -> Self:
        if self.min_length is not None and self.max_length is not None and self.min_length > self.max_length:
            raise PydanticCustomError("invalid_range", "min_length must not exceed max_length")
        return self

    @classmethod
    def builder(cls) -> "PlainTextInputBuilder":
        return PlainTextInputBuilder()


class PlainTextInputBuilder(Builder[PlainTextInput]):
    model = PlainTextInput

    def action_id(self, action_id: str | None) -> "PlainTextInputBuilder":
        return self._set("action_id", action_id)

    def initial_value(self, value: str | None) -> "PlainTextInputBuilder":
        return self._set("initial_value", value)

    def multiline(self, multiline: bool = True) -> "PlainTextInputBuilder":
        return self._set("multiline", multiline)

    def min_length(self, length: int | None) -> "PlainTextInputBuilder":
        return self._set("min_length", length)

    def max_length(self, length: int | None) -> "PlainTextInputBuilder":
        return self._set("max_length", length)

    def focus_on_load(self, focus: bool = True) -> "PlainTextInputBuilder":
        return self._set("focus_on_load", focus)

    def placeholder(self, placeholder: str | PlainText) -> "PlainTextInputBuilder":
        return self._set("placeholder", to_plain_text(placeholder))


class Checkboxes(BlockKitModel):
    """チェックボックスグループ（選択肢は1〜10個）"""

    type: Literal["checkboxes"] = "checkboxes"
    action_id: Annotated[str, Field(max_length=255)] | None = None
    options: Annotated[tuple[Option, ...], item_count(10, empty="empty_options")]
    initial_options: tuple[Option, ...] | None = None
    confirm: ConfirmationDialog | None = None
    focus_on_load: bool | None = None

    @classmethod
    def builder(cls) -> "CheckboxesBuilder":
        return CheckboxesBuilder()


class CheckboxesBuilder(Builder[Checkboxes]):
    model = Checkboxes

    def action_id(self, action_id: str | None) -> "CheckboxesBuilder":
        return self._set("action_id", action_id)

    def option(self, option: Option) -> "CheckboxesBuilder":
        return self._push("options", option)

    def initial_option(self, option: Option) -> "CheckboxesBuilder":
        return self._push("initial_options", option)

    def confirm(self, confirm: ConfirmationDialog | None) -> "CheckboxesBuilder":
        return self._set("confirm", confirm)

    def focus_on_load(self, focus: bool = True) -> "CheckboxesBuilder":
        return self._set("focus_on_load", focus)

    def build(self) -> Checkboxes:
        self._fields.setdefault("options", [])
        return super().build()


class RadioButtonGroup(BlockKitModel):
    """ラジオボタングループ（選択肢は1〜10個）"""

    type: Literal["radio_buttons"] = "radio_buttons"
    action_id: Annotated[str, Field(max_length=255)] | None = None
    options: Annotated[tuple[Option, ...], item_count(10, empty="empty_options")]
    initial_option: Option | None = None
    confirm: ConfirmationDialog | None = None
    focus_on_load: bool | None = None

    @classmethod
    def builder(cls) -> "RadioButtonGroupBuilder":
        return RadioButtonGroupBuilder()


class RadioButtonGroupBuilder(Builder[RadioButtonGroup]):
    model = RadioButtonGroup

    def action_id(self, action_id: str | None) -> "RadioButtonGroupBuilder":
        return self._set("action_id", action_id)

    def option(self, option: Option) -> "RadioButtonGroupBuilder":
        return self._push("options", option)

    def initial_option(self, option: Option | None) -> "RadioButtonGroupBuilder":
        return self._set("initial_option", option)

    def confirm(self, confirm: ConfirmationDialog | None) -> "RadioButtonGroupBuilder":
        return self._set("confirm", confirm)

    def focus_on_load(self, focus: bool = True) -> "RadioButtonGroupBuilder":
        return self._set("focus_on_load", focus)

    def build(self) -> RadioButtonGroup:
        self._fields.setdefault("options", [])
        return super().build()
