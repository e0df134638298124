from pathlib import Path

import pytest
import yaml

from slack_messaging.config.app import FormatterConfig, load_formatter_config


class TestFormatterConfig:
    """FormatterConfig Pydanticモデルのテスト"""

    def test_default_values(self) -> None:
        """デフォルト値が正しく設定されること"""
        config = FormatterConfig()
        assert config.date_format == "{date} {time}"
        assert config.date_link is None

    def test_custom_values(self) -> None:
        """カスタム値が正しく設定されること"""
        config = FormatterConfig(date_format="{date_short}", date_link="https://example.com")
        assert config.date_format == "{date_short}"
        assert config.date_link == "https://example.com"

    def test_reject_unknown_fields(self) -> None:
        """未知のフィールドでエラーになること"""
        with pytest.raises(ValueError):
            FormatterConfig(unknown_field="value")  # type: ignore[call-arg]


class TestLoadFormatterConfig:
    """load_formatter_config関数のテスト"""

    def test_load_from_yaml_file(self, tmp_path: Path) -> None:
        """YAMLファイルから正しく読み込めること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.dump({
                "date_format": "{date_long} {time_secs}",
                "date_link": "https://example.com",
            })
        )

        config = load_formatter_config(config_file)
        assert config.date_format == "{date_long} {time_secs}"
        assert config.date_link == "https://example.com"

    def test_load_with_default_values(self, tmp_path: Path) -> None:
        """一部の値のみ指定した場合、デフォルト値が使われること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"date_link": "https://example.com"}))

        config = load_formatter_config(config_file)
        assert config.date_format == "{date} {time}"  # デフォルト値
        assert config.date_link == "https://example.com"

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """空のYAMLファイルの場合はデフォルト値になること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        config = load_formatter_config(config_file)
        assert config == FormatterConfig()

    def test_load_fails_when_file_not_exists(self) -> None:
        """ファイルが存在しない場合にエラーになること"""
        with pytest.raises(FileNotFoundError):
            load_formatter_config(Path("/nonexistent/config.yaml"))

    def test_load_fails_when_invalid_yaml(self, tmp_path: Path) -> None:
        """不正なYAMLの場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("invalid: yaml: content:")

        with pytest.raises(ValueError):
            load_formatter_config(config_file)

    def test_load_fails_when_not_mapping(self, tmp_path: Path) -> None:
        """トップレベルがマッピングでない場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="mapping"):
            load_formatter_config(config_file)

    def test_reject_unknown_fields_in_yaml(self, tmp_path: Path) -> None:
        """YAMLに未知のフィールドがある場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"date_format": "{date}", "unknown_field": "value"}))

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_formatter_config(config_file)
