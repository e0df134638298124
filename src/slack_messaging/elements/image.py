"""画像要素（section の accessory や context ブロック内で使う）"""

from typing import Annotated, Literal

from pydantic import Field

from slack_messaging.validation import BlockKitModel, string_length


class ImageElement(BlockKitModel):
    type: Literal["image"] = "image"
    image_url: Annotated[str, Field(min_length=1, max_length=3000)]
    alt_text: Annotated[str, string_length(2000)]
