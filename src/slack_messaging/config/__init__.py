"""設定管理モジュール"""

from slack_messaging.config.app import FormatterConfig, load_formatter_config

__all__ = [
    "FormatterConfig",
    "load_formatter_config",
]
