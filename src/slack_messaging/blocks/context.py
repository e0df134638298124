"""contextブロック"""

from typing import Annotated, Literal

from pydantic import Field

from slack_messaging.composition import MrkdwnText, PlainText
from slack_messaging.elements import ImageElement
from slack_messaging.validation import BlockKitModel, Builder, item_count

MAX_ELEMENTS = 10

ContextElement = ImageElement | PlainText | MrkdwnText


class ContextBlock(BlockKitModel):
    type: Literal["context"] = "context"
    elements: Annotated[tuple[ContextElement, ...], item_count(MAX_ELEMENTS)]
    block_id: Annotated[str, Field(max_length=255)] | None = None

    @classmethod
    def builder(cls) -> "ContextBlockBuilder":
        return ContextBlockBuilder()


class ContextBlockBuilder(Builder[ContextBlock]):
    model = ContextBlock

    def element(self, element: ContextElement) -> "ContextBlockBuilder":
        return self._push("elements", element)

    def mrkdwn(self, text: str) -> "ContextBlockBuilder":
        return self.element(MrkdwnText(text=text))

    def plain_text(self, text: str) -> "ContextBlockBuilder":
        return self.element(PlainText(text=text))

    def image(self, image_url: str, alt_text: str) -> "ContextBlockBuilder":
        return self.element(ImageElement(image_url=image_url, alt_text=alt_text))

    def block_id(self, block_id: str | None) -> "ContextBlockBuilder":
        return self._set("block_id", block_id)

    def build(self) -> ContextBlock:
        self._fields.setdefault("elements", [])
        return super().build()
