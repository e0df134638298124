"""rich_textブロック

コンテナ（section, list, preformatted, quote）がインライン要素（text, link, emoji など）を持つ木構造。
listの各項目はrich_text_sectionになる。
"""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field

from slack_messaging.validation import BlockKitModel, Builder, item_count


class RichTextStyle(BlockKitModel):
    """インライン要素のスタイル（未指定のフラグは出力しない）"""

    bold: bool | None = None
    italic: bool | None = None
    strike: bool | None = None
    code: bool | None = None


class RichTextText(BlockKitModel):
    type: Literal["text"] = "text"
    text: str
    style: RichTextStyle | None = None


class RichTextLink(BlockKitModel):
    type: Literal["link"] = "link"
    url: str
    text: str | None = None
    unsafe: bool | None = None
    style: RichTextStyle | None = None


class RichTextEmoji(BlockKitModel):
    type: Literal["emoji"] = "emoji"
    name: str
    unicode: str | None = None


class RichTextUser(BlockKitModel):
    type: Literal["user"] = "user"
    user_id: str
    style: RichTextStyle | None = None


class RichTextUsergroup(BlockKitModel):
    type: Literal["usergroup"] = "usergroup"
    usergroup_id: str
    style: RichTextStyle | None = None


class RichTextChannel(BlockKitModel):
    type: Literal["channel"] = "channel"
    channel_id: str
    style: RichTextStyle | None = None


class BroadcastRange(StrEnum):
    HERE = "here"
    CHANNEL = "channel"
    EVERYONE = "everyone"


class RichTextBroadcast(BlockKitModel):
    type: Literal["broadcast"] = "broadcast"
    range: BroadcastRange


class RichTextDate(BlockKitModel):
    """日付要素（formatはDateFormatterと同じトークンを使う）"""

    type: Literal["date"] = "date"
    timestamp: int
    format: str
    url: str | None = None
    fallback: str | None = None


class RichTextColor(BlockKitModel):
    type: Literal["color"] = "color"
    value: Annotated[str, Field(pattern=r"^#[0-9A-Fa-f]{6}$")]


RichTextInline = Annotated[
    RichTextText
    | RichTextLink
    | RichTextEmoji
    | RichTextUser
    | RichTextUsergroup
    | RichTextChannel
    | RichTextBroadcast
    | RichTextDate
    | RichTextColor,
    Field(discriminator="type"),
]


class RichTextSection(BlockKitModel):
    type: Literal["rich_text_section"] = "rich_text_section"
    elements: tuple[RichTextInline, ...]


class RichTextListStyle(StrEnum):
    BULLET = "bullet"
    ORDERED = "ordered"


class RichTextList(BlockKitModel):
    type: Literal["rich_text_list"] = "rich_text_list"
    style: RichTextListStyle
    elements: Annotated[tuple[RichTextSection, ...], item_count(100)]
    indent: Annotated[int, Field(ge=0, le=8)] | None = None
    offset: Annotated[int, Field(ge=0)] | None = None
    border: Annotated[int, Field(ge=0, le=1)] | None = None


class RichTextPreformatted(BlockKitModel):
    type: Literal["rich_text_preformatted"] = "rich_text_preformatted"
    elements: tuple[RichTextInline, ...]
    border: Annotated[int, Field(ge=0, le=1)] | None = None


class RichTextQuote(BlockKitModel):
    type: Literal["rich_text_quote"] = "rich_text_quote"
    elements: tuple[RichTextInline, ...]
    border: Annotated[int, Field(ge=0, le=1)] | None = None


RichTextElement = Annotated[
    RichTextSection | RichTextList | RichTextPreformatted | RichTextQuote,
    Field(discriminator="type"),
]


class RichTextBlock(BlockKitModel):
    type: Literal["rich_text"] = "rich_text"
    elements: Annotated[tuple[RichTextElement, ...], item_count(100)]
    block_id: Annotated[str, Field(max_length=255)] | None = None

    @classmethod
    def builder(cls) -> "RichTextBlockBuilder":
        return RichTextBlockBuilder()


class RichTextBlockBuilder(Builder[RichTextBlock]):
    model = RichTextBlock

    def element(
        self, element: RichTextSection | RichTextList | RichTextPreformatted | RichTextQuote
    ) -> "RichTextBlockBuilder":
        return self._push("elements", element)

    def section(self, *spans: RichTextText | RichTextLink | RichTextEmoji | RichTextUser) -> "RichTextBlockBuilder":
        """インライン要素を並べたrich_text_sectionを追加する"""
        return self.element(RichTextSection(elements=spans))

    def bullet_list(self, *items: RichTextSection, indent: int | None = None) -> "RichTextBlockBuilder":
        return self.element(RichTextList(style=RichTextListStyle.BULLET, elements=items, indent=indent))

    def ordered_list(self, *items: RichTextSection, indent: int | None = None) -> "RichTextBlockBuilder":
        return self.element(RichTextList(style=RichTextListStyle.ORDERED, elements=items, indent=indent))

    def block_id(self, block_id: str | None) -> "RichTextBlockBuilder":
        return self._set("block_id", block_id)

    def build(self) -> RichTextBlock:
        self._fields.setdefault("elements", [])
        return super().build()
