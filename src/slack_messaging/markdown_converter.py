"""Markdown→Slack mrkdwn変換モジュール

GitHub MarkdownをSlack mrkdwn記法に変換する薄いラッパー。
ライブラリ差し替え時の変更箇所を限定するため、変換ロジックを集約する。
"""

import re

from markdown_to_mrkdwn import SlackMarkdownConverter

_CODE_PATTERN = re.compile(r"(```[\s\S]*?```|`[^`]+`)")
# <url> または <url|text> 形式のSlackリンク
# textには > が含まれうるため、次のリンク開始より前の最後の > を終端とする
_LINK_START = r"<(?:https?://|mailto:)"
_LINK_PATTERN = re.compile(
    r"<((?:https?://|mailto:)[^|>\s]+)(?:\|((?:(?!" + _LINK_START + r").)*)>|>)",
    re.DOTALL,
)


def _escape_text(text: str) -> str:
    """テキスト内の &, <, > をエスケープする。"""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_outside_links(text: str) -> str:
    """Slackリンクを保護しつつ、リンク外とリンクテキストをエスケープする。

    URL部分はそのまま保持する。
    """
    result: list[str] = []
    pos = 0
    for match in _LINK_PATTERN.finditer(text):
        result.append(_escape_text(text[pos : match.start()]))
        url, label = match.group(1), match.group(2)
        if label is None:
            result.append(f"<{url}>")
        else:
            result.append(f"<{url}|{_escape_text(label)}>")
        pos = match.end()
    result.append(_escape_text(text[pos:]))
    return "".join(result)


def escape_mrkdwn(text: str) -> str:
    """mrkdwnテキストの特殊文字をエスケープする。

    コードブロック(```)およびインラインコード(`)内はエスケープしない。
    """
    parts = _CODE_PATTERN.split(text)
    # splitの結果は奇数番目がコード部分
    return "".join(part if i % 2 == 1 else _escape_outside_links(part) for i, part in enumerate(parts))


def convert_markdown_to_mrkdwn(text: str) -> str:
    """MarkdownテキストをSlack mrkdwn記法に変換する。

    Args:
        text: Markdown形式のテキスト

    Returns:
        Slack mrkdwn形式に変換されたテキスト
    """
    converter = SlackMarkdownConverter()
    return escape_mrkdwn(converter.convert(text))
