"""コンポジションオブジェクトのテスト"""

import pytest

from slack_messaging.composition import (
    ConfirmationDialog,
    ConfirmStyle,
    ConversationFilter,
    ConversationType,
    MrkdwnText,
    Option,
    OptionGroup,
    PlainText,
    option,
)
from slack_messaging.exceptions import (
    BlockKitValidationError,
    ElementCountExceededError,
    EmptyOptionsError,
    EmptyTextError,
)


class TestOption:
    """Optionのテスト"""

    def test_option_helper(self) -> None:
        """option()でplain_textの選択肢が作れること"""
        assert option("Red", "red", description="warm").to_dict() == {
            "text": {"type": "plain_text", "text": "Red", "emoji": True},
            "value": "red",
            "description": {"type": "plain_text", "text": "warm", "emoji": True},
        }

    def test_mrkdwn_text_allowed(self) -> None:
        """mrkdwnのtextも保持できること"""
        opt = Option(text=MrkdwnText(text="*Red*"), value="red")
        assert opt.to_dict()["text"]["type"] == "mrkdwn"

    def test_empty_text_fails(self) -> None:
        """textが空だとEmptyTextErrorになること"""
        with pytest.raises(EmptyTextError):
            option("", "red")

    def test_value_too_long_fails(self) -> None:
        """valueが150文字を超えるとエラーになること"""
        with pytest.raises(BlockKitValidationError):
            option("Red", "a" * 151)


class TestOptionGroup:
    """OptionGroupのテスト"""

    def test_to_dict(self) -> None:
        """labelと選択肢がシリアライズされること"""
        group = OptionGroup(label=PlainText(text="Colors"), options=(option("Red", "red"),))
        assert group.to_dict()["label"]["text"] == "Colors"
        assert len(group.to_dict()["options"]) == 1

    def test_empty_options_fail(self) -> None:
        """選択肢が空だとEmptyOptionsErrorになること"""
        with pytest.raises(EmptyOptionsError):
            OptionGroup(label=PlainText(text="Colors"), options=())

    def test_too_many_options_fail(self) -> None:
        """選択肢が100個を超えるとElementCountExceededErrorになること"""
        options = tuple(option(str(i), str(i)) for i in range(101))
        with pytest.raises(ElementCountExceededError):
            OptionGroup(label=PlainText(text="Numbers"), options=options)


class TestConfirmationDialog:
    """ConfirmationDialogのテスト"""

    def test_build(self) -> None:
        """ビルダーで確認ダイアログが作れること"""
        dialog = (
            ConfirmationDialog.builder()
            .title("Are you sure?")
            .text("This cannot be undone.")
            .confirm("Do it")
            .deny("Stop")
            .danger()
            .build()
        )
        assert dialog.to_dict() == {
            "title": {"type": "plain_text", "text": "Are you sure?", "emoji": True},
            "text": {"type": "plain_text", "text": "This cannot be undone.", "emoji": True},
            "confirm": {"type": "plain_text", "text": "Do it", "emoji": True},
            "deny": {"type": "plain_text", "text": "Stop", "emoji": True},
            "style": "danger",
        }
        assert dialog.style is ConfirmStyle.DANGER

    def test_missing_field_fails(self) -> None:
        """必須フィールドが欠けているとエラーになること"""
        with pytest.raises(BlockKitValidationError) as exc_info:
            ConfirmationDialog.builder().title("Sure?").text("Really?").confirm("Yes").build()
        assert "missing" in exc_info.value.error_types

    def test_confirm_too_long_fails(self) -> None:
        """confirmが30文字を超えるとエラーになること"""
        builder = ConfirmationDialog.builder().title("Sure?").text("Really?").confirm("y" * 31).deny("No")
        with pytest.raises(BlockKitValidationError) as exc_info:
            builder.build()
        assert exc_info.value.error_types == ["text_too_long"]


class TestConversationFilter:
    """ConversationFilterのテスト"""

    def test_to_dict(self) -> None:
        """指定したフィールドのみ出力されること"""
        conversation_filter = ConversationFilter(
            include=(ConversationType.PUBLIC, ConversationType.MPIM),
            exclude_bot_users=True,
        )
        assert conversation_filter.to_dict() == {"include": ["public", "mpim"], "exclude_bot_users": True}

    def test_empty_include_fails(self) -> None:
        """includeが空だとエラーになること"""
        with pytest.raises(BlockKitValidationError):
            ConversationFilter(include=())
