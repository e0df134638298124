"""sectionブロックのテスト"""

import pytest

from slack_messaging.blocks import SectionBlock
from slack_messaging.composition import MrkdwnText, PlainText
from slack_messaging.elements import Button, ImageElement
from slack_messaging.exceptions import BlockKitValidationError, EmptyTextError, FieldCountExceededError


class TestSectionBlock:
    """SectionBlockのテスト"""

    def test_text_only(self) -> None:
        """textのみのsectionが作れること"""
        section = SectionBlock.builder().mrkdwn("*Hello*").build()
        assert section.to_dict() == {
            "type": "section",
            "text": {"type": "mrkdwn", "text": "*Hello*", "verbatim": False},
        }

    def test_fields_and_accessory(self) -> None:
        """fieldsとaccessoryが出力されること"""
        section = (
            SectionBlock.builder()
            .block_id("summary")
            .mrkdwn_field("*Status*")
            .plain_text_field("Open")
            .accessory(Button.builder().text("View").action_id("view").build())
            .build()
        )
        data = section.to_dict()
        assert data["block_id"] == "summary"
        assert [field["type"] for field in data["fields"]] == ["mrkdwn", "plain_text"]
        assert data["accessory"]["type"] == "button"
        assert "text" not in data

    def test_image_accessory(self) -> None:
        """画像要素をaccessoryに置けること"""
        image = ImageElement(image_url="https://example.com/a.png", alt_text="a")
        section = SectionBlock.builder().plain_text("Picture").accessory(image).build()
        assert section.to_dict()["accessory"] == {
            "type": "image",
            "image_url": "https://example.com/a.png",
            "alt_text": "a",
        }

    def test_ten_fields(self) -> None:
        """fieldsは10個まで許されること"""
        builder = SectionBlock.builder()
        for i in range(10):
            builder.plain_text_field(str(i))
        assert len(builder.build().to_dict()["fields"]) == 10

    def test_eleven_fields_fail_at_build(self) -> None:
        """11個目のfieldの追加は成功し、build()でFieldCountExceededErrorになること"""
        builder = SectionBlock.builder()
        for i in range(11):
            builder = builder.mrkdwn_field(f"field {i}")
        with pytest.raises(FieldCountExceededError) as exc_info:
            builder.build()
        assert exc_info.value.model == "SectionBlock"

    def test_fields_replaces(self) -> None:
        """fields()はそれまでのfieldを置き換えること"""
        section = (
            SectionBlock.builder()
            .plain_text_field("old")
            .fields([PlainText(text="a"), MrkdwnText(text="b")])
            .build()
        )
        assert [field["text"] for field in section.to_dict()["fields"]] == ["a", "b"]

    def test_missing_text_and_fields_fails(self) -> None:
        """textもfieldsもないとエラーになること"""
        with pytest.raises(BlockKitValidationError) as exc_info:
            SectionBlock.builder().block_id("empty").build()
        assert exc_info.value.error_types == ["missing_text"]

    def test_empty_text_fails(self) -> None:
        """空のtextはEmptyTextErrorになること"""
        with pytest.raises(EmptyTextError):
            SectionBlock.builder().plain_text("").build()

    def test_text_too_long_fails(self) -> None:
        """textが3000文字を超えるとエラーになること"""
        with pytest.raises(BlockKitValidationError):
            SectionBlock.builder().mrkdwn("a" * 3001).build()
