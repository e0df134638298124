"""inputブロック"""

from typing import Annotated, Literal

from pydantic import Field

from slack_messaging.composition import PlainText, to_plain_text
from slack_messaging.elements import InputElement
from slack_messaging.validation import BlockKitModel, Builder, text_length


class InputBlock(BlockKitModel):
    type: Literal["input"] = "input"
    label: Annotated[PlainText, text_length(2000)]
    element: InputElement
    dispatch_action: bool | None = None
    block_id: Annotated[str, Field(max_length=255)] | None = None
    hint: Annotated[PlainText, text_length(2000)] | None = None
    optional: bool | None = None

    @classmethod
    def builder(cls) -> "InputBlockBuilder":
        return InputBlockBuilder()


class InputBlockBuilder(Builder[InputBlock]):
    model = InputBlock

    def label(self, label: str | PlainText) -> "InputBlockBuilder":
        return self._set("label", to_plain_text(label))

    def element(self, element: InputElement) -> "InputBlockBuilder":
        return self._set("element", element)

    def dispatch_action(self, dispatch: bool = True) -> "InputBlockBuilder":
        return self._set("dispatch_action", dispatch)

    def block_id(self, block_id: str | None) -> "InputBlockBuilder":
        return self._set("block_id", block_id)

    def hint(self, hint: str | PlainText) -> "InputBlockBuilder":
        return self._set("hint", to_plain_text(hint))

    def optional(self, optional: bool = True) -> "InputBlockBuilder":
        return self._set("optional", optional)
