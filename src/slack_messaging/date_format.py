"""Slackの日付置換記法 <!date^...> を組み立てるフォーマッタ

テンプレート中の {date_short} などのトークンはSlackクライアント側で閲覧者のロケールに
合わせて描画される。描画できないクライアント向けのフォールバック文字列は、
タイムスタンプ自身のUTCオフセットで英語表記に描画する。
認識できないトークンや通常の文字列はそのまま残す。
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from slack_messaging.blocks.rich_text import RichTextDate

if TYPE_CHECKING:
    from slack_messaging.config import FormatterConfig

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "{date} {time}"

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


# 日と12時間制の時は2桁に空白埋めする（例: "Feb  5, 2023", " 9:05 AM"）
def _date_num(dt: datetime) -> str:
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"


def _date(dt: datetime) -> str:
    return f"{_MONTHS[dt.month - 1]} {dt.day:>2}, {dt.year:04d}"


def _date_short(dt: datetime) -> str:
    return f"{_MONTHS[dt.month - 1][:3]} {dt.day:>2}, {dt.year:04d}"


def _date_long(dt: datetime) -> str:
    return f"{_WEEKDAYS[dt.weekday()]}, {_date(dt)}"


def _meridiem(dt: datetime) -> tuple[int, str]:
    return dt.hour % 12 or 12, "AM" if dt.hour < 12 else "PM"


def _time(dt: datetime) -> str:
    hour, meridiem = _meridiem(dt)
    return f"{hour:>2}:{dt.minute:02d} {meridiem}"


def _time_secs(dt: datetime) -> str:
    hour, meridiem = _meridiem(dt)
    return f"{hour:>2}:{dt.minute:02d}:{dt.second:02d} {meridiem}"


TOKENS: dict[str, Callable[[datetime], str]] = {
    "date_num": _date_num,
    "date": _date,
    "date_short": _date_short,
    "date_long": _date_long,
    "date_pretty": _date,
    "date_short_pretty": _date_short,
    "date_long_pretty": _date_long,
    "time": _time,
    "time_secs": _time_secs,
}

_TOKEN_PATTERN = re.compile(r"\{(" + "|".join(TOKENS) + r")\}")


def _normalize(timestamp: datetime) -> datetime:
    # naiveなdatetimeはUTCとみなす
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp


@dataclass(frozen=True)
class DateFormatter:
    """日付置換記法のフォーマッタ

    Attributes:
        template: トークンを含むテンプレート（例: "{date_short} at {time}"）
        link: 日付に付けるリンク（format()でのみ使われる）
    """

    template: str = DEFAULT_FORMAT
    link: str | None = None

    @classmethod
    def from_config(cls, config: FormatterConfig) -> DateFormatter:
        return cls(template=config.date_format, link=config.date_link)

    def fallback_text(self, timestamp: datetime) -> str:
        """テンプレートのトークンを英語表記に置き換えたフォールバック文字列を返す"""
        dt = _normalize(timestamp)
        rendered, count = _TOKEN_PATTERN.subn(lambda m: TOKENS[m.group(1)](dt), self.template)
        if count == 0:
            logger.debug("Date template has no recognized tokens: %r", self.template)
        return rendered

    def format(self, timestamp: datetime) -> str:
        """日付置換記法の文字列を返す（生成時に指定したlinkがあれば含める）

        Args:
            timestamp: 表示する日時（UTCオフセット付きを想定）

        Returns:
            str: <!date^エポック秒^テンプレート[^リンク]|フォールバック> 形式の文字列
        """
        return self._render(timestamp, self.link)

    def format_with_link(self, timestamp: datetime, link: str) -> str:
        """指定したlinkで日付置換記法の文字列を返す（生成時のlinkは使わない）"""
        return self._render(timestamp, link)

    def to_rich_text(self, timestamp: datetime) -> RichTextDate:
        """同じ内容のrich_textの日付要素を返す"""
        return RichTextDate(
            timestamp=_epoch_seconds(timestamp),
            format=self.template,
            url=self.link,
            fallback=self.fallback_text(timestamp),
        )

    def _render(self, timestamp: datetime, link: str | None) -> str:
        link_segment = f"^{link}" if link is not None else ""
        return f"<!date^{_epoch_seconds(timestamp)}^{self.template}{link_segment}|{self.fallback_text(timestamp)}>"


def _epoch_seconds(timestamp: datetime) -> int:
    return math.floor(_normalize(timestamp).timestamp())
