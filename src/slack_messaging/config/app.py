"""フォーマッタ設定"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError


class FormatterConfig(BaseModel):
    """フォーマッタ設定"""

    date_format: str = Field(default="{date} {time}", description="日付置換記法のテンプレート")
    date_link: str | None = Field(default=None, description="日付に付けるリンク")

    model_config = {"extra": "forbid"}


def load_formatter_config(config_path: Path) -> FormatterConfig:
    """YAMLファイルからFormatterConfigを読み込む

    Args:
        config_path: 設定ファイルのパス

    Returns:
        FormatterConfig: フォーマッタ設定（空ファイルならデフォルト値）

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 設定ファイルが不正な場合
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                msg = f"Config file must contain a mapping: {config_path}"
                raise ValueError(msg)
            return FormatterConfig(**data)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML file: {e}"
        raise ValueError(msg) from e
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ValueError(msg) from e
