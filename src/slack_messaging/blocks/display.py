"""表示専用のブロック（divider, header, image, markdown）"""

from typing import Annotated, Literal

from pydantic import Field

from slack_messaging.composition import PlainText, to_plain_text
from slack_messaging.validation import BlockKitModel, Builder, string_length, text_length


class DividerBlock(BlockKitModel):
    type: Literal["divider"] = "divider"
    block_id: Annotated[str, Field(max_length=255)] | None = None


class HeaderBlock(BlockKitModel):
    """headerブロック（plain_text、最大150文字）"""

    type: Literal["header"] = "header"
    text: Annotated[PlainText, text_length(150)]
    block_id: Annotated[str, Field(max_length=255)] | None = None

    @classmethod
    def builder(cls) -> "HeaderBlockBuilder":
        return HeaderBlockBuilder()


class HeaderBlockBuilder(Builder[HeaderBlock]):
    model = HeaderBlock

    def text(self, text: str | PlainText) -> "HeaderBlockBuilder":
        return self._set("text", to_plain_text(text))

    def block_id(self, block_id: str | None) -> "HeaderBlockBuilder":
        return self._set("block_id", block_id)


class ImageBlock(BlockKitModel):
    type: Literal["image"] = "image"
    image_url: Annotated[str, Field(min_length=1, max_length=3000)]
    alt_text: Annotated[str, string_length(2000)]
    title: Annotated[PlainText, text_length(2000)] | None = None
    block_id: Annotated[str, Field(max_length=255)] | None = None

    @classmethod
    def builder(cls) -> "ImageBlockBuilder":
        return ImageBlockBuilder()


class ImageBlockBuilder(Builder[ImageBlock]):
    model = ImageBlock

    def image_url(self, url: str) -> "ImageBlockBuilder":
        return self._set("image_url", url)

    def alt_text(self, alt_text: str) -> "ImageBlockBuilder":
        return self._set("alt_text", alt_text)

    def title(self, title: str | PlainText) -> "ImageBlockBuilder":
        return self._set("title", to_plain_text(title))

    def block_id(self, block_id: str | None) -> "ImageBlockBuilder":
        return self._set("block_id", block_id)


class MarkdownBlock(BlockKitModel):
    """標準Markdownをそのまま渡せるmarkdownブロック（最大12000文字）"""

    type: Literal["markdown"] = "markdown"
    text: Annotated[str, string_length(12000)]
    block_id: Annotated[str, Field(max_length=255)] | None = None
