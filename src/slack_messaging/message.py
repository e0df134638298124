"""メッセージ（ブロック列とトップレベルのフィールド）"""

from enum import StrEnum
from typing import Annotated

from slack_messaging.blocks import Block
from slack_messaging.validation import BlockKitModel, Builder, item_count

MAX_BLOCKS = 50


class ResponseType(StrEnum):
    IN_CHANNEL = "in_channel"
    EPHEMERAL = "ephemeral"


class Message(BlockKitModel):
    """送信するメッセージ本体

    blocksは空でも常に出力する。その他のフィールドは指定した場合のみ出力する。
    """

    text: str | None = None
    blocks: Annotated[tuple[Block, ...], item_count(MAX_BLOCKS, min_items=0)] = ()
    thread_ts: str | None = None
    reply_broadcast: bool | None = None
    mrkdwn: bool | None = None
    response_type: ResponseType | None = None
    replace_original: bool | None = None
    delete_original: bool | None = None

    @classmethod
    def builder(cls) -> "MessageBuilder":
        return MessageBuilder()


class MessageBuilder(Builder[Message]):
    model = Message

    def text(self, text: str | None) -> "MessageBuilder":
        """通知やブロック非対応クライアント向けのフォールバックテキスト"""
        return self._set("text", text)

    def block(self, block: Block) -> "MessageBuilder":
        return self._push("blocks", block)

    def blocks(self, blocks: list[Block]) -> "MessageBuilder":
        return self._extend("blocks", blocks)

    def thread_ts(self, thread_ts: str | None) -> "MessageBuilder":
        return self._set("thread_ts", thread_ts)

    def reply_broadcast(self, broadcast: bool = True) -> "MessageBuilder":
        return self._set("reply_broadcast", broadcast)

    def mrkdwn(self, enabled: bool = True) -> "MessageBuilder":
        return self._set("mrkdwn", enabled)

    def response_type(self, response_type: ResponseType | None) -> "MessageBuilder":
        return self._set("response_type", response_type)

    def replace_original(self, replace: bool = True) -> "MessageBuilder":
        return self._set("replace_original", replace)

    def delete_original(self, delete: bool = True) -> "MessageBuilder":
        return self._set("delete_original", delete)
