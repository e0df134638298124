"""sectionブロック

fieldsの上限（10個）はpush時ではなくbuild()時に検査する。
"""

from typing import Annotated, Literal, Self

from pydantic import Field, model_validator
from pydantic_core import PydanticCustomError

from slack_messaging.composition import MrkdwnText, PlainText, Text
from slack_messaging.elements import AccessoryElement
from slack_messaging.validation import BlockKitModel, Builder, item_count, text_length

MAX_FIELDS = 10


class SectionBlock(BlockKitModel):
    type: Literal["section"] = "section"
    text: Annotated[Text, text_length(3000)] | None = None
    block_id: Annotated[str, Field(max_length=255)] | None = None
    fields: (
        Annotated[
            tuple[Annotated[Text, text_length(2000)], ...],
            item_count(MAX_FIELDS, exceeded="field_count_exceeded"),
        ]
        | None
    ) = None
    accessory: AccessoryElement | None = None
    expand: bool | None = None

    @model_validator(mode="after")
    def _check_text_or_fields(self) -> Self:
        if self.text is None and self.fields is None:
            raise PydanticCustomError("missing_text", "either text or fields is required")
        return self

    @classmethod
    def builder(cls) -> "SectionBlockBuilder":
        return SectionBlockBuilder()


class SectionBlockBuilder(Builder[SectionBlock]):
    model = SectionBlock

    def text(self, text: PlainText | MrkdwnText | None) -> "SectionBlockBuilder":
        return self._set("text", text)

    def plain_text(self, text: str) -> "SectionBlockBuilder":
        return self.text(PlainText(text=text))

    def mrkdwn(self, text: str) -> "SectionBlockBuilder":
        return self.text(MrkdwnText(text=text))

    def block_id(self, block_id: str | None) -> "SectionBlockBuilder":
        return self._set("block_id", block_id)

    def field(self, field: PlainText | MrkdwnText) -> "SectionBlockBuilder":
        return self._push("fields", field)

    def plain_text_field(self, text: str) -> "SectionBlockBuilder":
        return self.field(PlainText(text=text))

    def mrkdwn_field(self, text: str) -> "SectionBlockBuilder":
        return self.field(MrkdwnText(text=text))

    def fields(self, fields: list[PlainText | MrkdwnText]) -> "SectionBlockBuilder":
        return self._set("fields", list(fields))

    def accessory(self, accessory: AccessoryElement | None) -> "SectionBlockBuilder":
        return self._set("accessory", accessory)

    def expand(self, expand: bool = True) -> "SectionBlockBuilder":
        return self._set("expand", expand)
