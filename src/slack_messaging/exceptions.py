"""Block Kitメッセージ構築に関する例外"""

from typing import Any


class BlockKitError(Exception):
    """slack_messaging関連のエラーの基底クラス"""


class BlockKitValidationError(BlockKitError):
    """オブジェクトの構築時にバリデーションで弾かれた場合のエラー"""

    def __init__(self, message: str, model: str, errors: list[dict[str, Any]]) -> None:
        """初期化

        Args:
            message: エラーメッセージ
            model: 構築しようとしたモデルのクラス名
            errors: pydanticのエラー詳細（type, loc, msg など）
        """
        super().__init__(message)
        self.model = model
        self.errors = errors

    @property
    def error_types(self) -> list[str]:
        """エラー種別の一覧"""
        return [error["type"] for error in self.errors]


class EmptyTextError(BlockKitValidationError):
    """空文字が許されない箇所に空のテキストが渡された場合のエラー"""


class EmptyOptionsError(BlockKitValidationError):
    """選択肢が1つも指定されていない場合のエラー"""


class FieldCountExceededError(BlockKitValidationError):
    """sectionブロックのfieldsが上限を超えた場合のエラー"""


class ElementCountExceededError(BlockKitValidationError):
    """要素数（elements, options, blocks）が上限を超えた場合のエラー"""


class IncompatibleDataSourceOptionsError(BlockKitValidationError):
    """セレクトメニューのデータソースと矛盾するフィールドが指定された場合のエラー"""
