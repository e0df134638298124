"""overflowメニューのテスト"""

import pytest

from slack_messaging.composition import MrkdwnText, Option, option
from slack_messaging.elements import OverflowMenu
from slack_messaging.exceptions import BlockKitValidationError, ElementCountExceededError, EmptyOptionsError


class TestOverflowMenu:
    """OverflowMenuのテスト"""

    def test_to_dict(self) -> None:
        """選択肢が出力されること"""
        menu = OverflowMenu.builder().action_id("more").option(option("Edit", "edit")).build()
        data = menu.to_dict()
        assert data["type"] == "overflow"
        assert data["options"][0]["value"] == "edit"

    def test_no_options_fail(self) -> None:
        """選択肢がないとEmptyOptionsErrorになること"""
        with pytest.raises(EmptyOptionsError):
            OverflowMenu.builder().action_id("more").build()

    def test_six_options_fail(self) -> None:
        """選択肢が5個を超えるとElementCountExceededErrorになること"""
        builder = OverflowMenu.builder()
        for i in range(6):
            builder.option(option(str(i), str(i)))
        with pytest.raises(ElementCountExceededError):
            builder.build()

    def test_mrkdwn_option_fails(self) -> None:
        """mrkdwnの選択肢は受け付けないこと"""
        with pytest.raises(BlockKitValidationError):
            OverflowMenu.builder().option(Option(text=MrkdwnText(text="*A*"), value="a")).build()
