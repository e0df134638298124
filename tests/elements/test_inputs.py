"""入力系要素のテスト"""

import pytest

from slack_messaging.composition import MrkdwnText, Option, option
from slack_messaging.elements import Checkboxes, PlainTextInput, RadioButtonGroup
from slack_messaging.exceptions import BlockKitValidationError, ElementCountExceededError, EmptyOptionsError


class TestPlainTextInput:
    """PlainTextInputのテスト"""

    def test_to_dict(self) -> None:
        """指定したフィールドのみ出力されること"""
        text_input = PlainTextInput.builder().action_id("comment").multiline().max_length(500).build()
        assert text_input.to_dict() == {
            "type": "plain_text_input",
            "action_id": "comment",
            "multiline": True,
            "max_length": 500,
        }

    def test_min_length_exceeds_max_length(self) -> None:
        """min_lengthがmax_lengthを超えるとエラーになること"""
        with pytest.raises(BlockKitValidationError) as exc_info:
            PlainTextInput.builder().min_length(10).max_length(5).build()
        assert exc_info.value.error_types == ["invalid_range"]


class TestCheckboxes:
    """Checkboxesのテスト"""

    def test_mrkdwn_options(self) -> None:
        """mrkdwnの選択肢が使えること"""
        bold = Option(text=MrkdwnText(text="*Bold*"), value="bold")
        checkboxes = Checkboxes.builder().option(bold).option(option("Plain", "plain")).initial_option(bold).build()
        data = checkboxes.to_dict()
        assert data["type"] == "checkboxes"
        assert data["options"][0]["text"] == {"type": "mrkdwn", "text": "*Bold*", "verbatim": False}
        assert data["initial_options"] == [data["options"][0]]

    def test_no_options_fail(self) -> None:
        """選択肢がないとEmptyOptionsErrorになること"""
        with pytest.raises(EmptyOptionsError):
            Checkboxes.builder().build()

    def test_eleven_options_fail(self) -> None:
        """選択肢が10個を超えるとElementCountExceededErrorになること"""
        builder = Checkboxes.builder()
        for i in range(11):
            builder.option(option(str(i), str(i)))
        with pytest.raises(ElementCountExceededError):
            builder.build()


class TestRadioButtonGroup:
    """RadioButtonGroupのテスト"""

    def test_to_dict(self) -> None:
        """typeがradio_buttonsとして出力されること"""
        yes = option("Yes", "yes")
        radio = RadioButtonGroup.builder().option(yes).option(option("No", "no")).initial_option(yes).build()
        data = radio.to_dict()
        assert data["type"] == "radio_buttons"
        assert data["initial_option"]["value"] == "yes"

    def test_no_options_fail(self) -> None:
        """選択肢がないとEmptyOptionsErrorになること"""
        with pytest.raises(EmptyOptionsError):
            RadioButtonGroup.builder().action_id("answer").build()
