"""actionsブロック"""

from typing import Annotated, Literal

from pydantic import Field

from slack_messaging.elements import ActionsElement
from slack_messaging.validation import BlockKitModel, Builder, item_count

MAX_ELEMENTS = 25


class ActionsBlock(BlockKitModel):
    type: Literal["actions"] = "actions"
    elements: Annotated[tuple[ActionsElement, ...], item_count(MAX_ELEMENTS)]
    block_id: Annotated[str, Field(max_length=255)] | None = None

    @classmethod
    def builder(cls) -> "ActionsBlockBuilder":
        return ActionsBlockBuilder()


class ActionsBlockBuilder(Builder[ActionsBlock]):
    model = ActionsBlock

    def element(self, element: ActionsElement) -> "ActionsBlockBuilder":
        return self._push("elements", element)

    def elements(self, elements: list[ActionsElement]) -> "ActionsBlockBuilder":
        return self._extend("elements", elements)

    def block_id(self, block_id: str | None) -> "ActionsBlockBuilder":
        return self._set("block_id", block_id)

    def build(self) -> ActionsBlock:
        self._fields.setdefault("elements", [])
        return super().build()
