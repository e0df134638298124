"""テキストオブジェクト（plain_text / mrkdwn）"""

from typing import Annotated, Literal

from pydantic import Field

from slack_messaging.markdown_converter import convert_markdown_to_mrkdwn
from slack_messaging.validation import BlockKitModel


class PlainText(BlockKitModel):
    """書式なしテキスト

    空文字でも生成できる。空を許さないかどうかは利用側の要素・ブロックが検査する。
    """

    type: Literal["plain_text"] = "plain_text"
    text: str
    emoji: bool = True

    def as_plain(self) -> "PlainText":
        return self

    def as_mrkdwn(self) -> "MrkdwnText":
        return MrkdwnText(text=self.text)


class MrkdwnText(BlockKitModel):
    """mrkdwn記法のテキスト"""

    type: Literal["mrkdwn"] = "mrkdwn"
    text: str
    verbatim: bool = False

    def as_plain(self) -> PlainText:
        return PlainText(text=self.text)

    def as_mrkdwn(self) -> "MrkdwnText":
        return self

    @classmethod
    def from_markdown(cls, markdown: str, verbatim: bool = False) -> "MrkdwnText":
        """GitHub Markdownをmrkdwnに変換してテキストオブジェクトを作る"""
        return cls(text=convert_markdown_to_mrkdwn(markdown), verbatim=verbatim)


Text = Annotated[PlainText | MrkdwnText, Field(discriminator="type")]


def plain_text(text: str, emoji: bool = True) -> PlainText:
    return PlainText(text=text, emoji=emoji)


def mrkdwn(text: str, verbatim: bool = False) -> MrkdwnText:
    return MrkdwnText(text=text, verbatim=verbatim)


def to_plain_text(value: str | PlainText) -> PlainText:
    """文字列ならPlainTextに包む（ビルダーのsetter用）"""
    return PlainText(text=value) if isinstance(value, str) else value
