"""モデル共通の基底クラス・ビルダー・バリデータ

Block Kitの各オブジェクトはfrozenなpydanticモデルとして表現し、
フィールド単位の制約はAnnotatedに埋め込んだバリデータで検査する。
モデル生成時のpydanticのValidationErrorはBlockKitValidationErrorに変換して送出する。
"""

import logging
from typing import Any, Generic, Protocol, Self, TypeVar

from pydantic import AfterValidator, BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from slack_messaging.exceptions import (
    BlockKitValidationError,
    ElementCountExceededError,
    EmptyOptionsError,
    EmptyTextError,
    FieldCountExceededError,
    IncompatibleDataSourceOptionsError,
)

logger = logging.getLogger(__name__)

_ERROR_CLASSES: dict[str, type[BlockKitValidationError]] = {
    "empty_text": EmptyTextError,
    "empty_options": EmptyOptionsError,
    "field_count_exceeded": FieldCountExceededError,
    "element_count_exceeded": ElementCountExceededError,
    "incompatible_data_source_options": IncompatibleDataSourceOptionsError,
}


def convert_validation_error(model_name: str, error: ValidationError) -> BlockKitValidationError:
    """pydanticのValidationErrorを対応するBlockKitValidationErrorに変換する

    最初に見つかった既知のエラー種別でサブクラスを選ぶ。該当がなければ基底クラスになる。
    """
    errors = error.errors(include_url=False)
    logger.debug("Validation failed for %s: %d error(s)", model_name, len(errors))
    error_class = next(
        (_ERROR_CLASSES[err["type"]] for err in errors if err["type"] in _ERROR_CLASSES),
        BlockKitValidationError,
    )
    details = "; ".join(f"{'.'.join(str(p) for p in err['loc']) or '*'}: {err['msg']}" for err in errors)
    return error_class(f"Invalid {model_name}: {details}", model_name, errors)


class BlockKitModel(BaseModel):
    """Block Kitオブジェクトの基底クラス（イミュータブル）

    生成時にバリデーションに失敗するとBlockKitValidationErrorを送出する。
    """

    model_config = {"frozen": True, "extra": "forbid"}

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise convert_validation_error(type(self).__name__, e) from e

    def to_dict(self) -> dict[str, Any]:
        """ワイヤ形式のdictに変換する（未設定のフィールドは出力しない）"""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        """ワイヤ形式のJSON文字列に変換する"""
        return self.model_dump_json(exclude_none=True)


ModelT = TypeVar("ModelT", bound=BlockKitModel)


class Builder(Generic[ModelT]):
    """チェーン可能なsetterでフィールドを集め、build()でモデルを確定させるビルダー"""

    model: type[ModelT]

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> Self:
        # Noneは未設定扱い
        if value is None:
            self._fields.pop(name, None)
        else:
            self._fields[name] = value
        return self

    def _push(self, name: str, item: Any) -> Self:
        self._fields.setdefault(name, []).append(item)
        return self

    def _extend(self, name: str, items: Any) -> Self:
        self._fields.setdefault(name, []).extend(items)
        return self

    def build(self) -> ModelT:
        """モデルを確定させる

        Raises:
            BlockKitValidationError: バリデーションに失敗した場合
        """
        return self.model(**self._fields)


class _HasText(Protocol):
    text: str


def _check_length(text: str, max_length: int) -> None:
    if not text:
        raise PydanticCustomError("empty_text", "text must not be empty")
    if len(text) > max_length:
        raise PydanticCustomError(
            "text_too_long",
            "text must be at most {max_length} characters",
            {"max_length": max_length},
        )


def text_length(max_length: int) -> AfterValidator:
    """テキストオブジェクトが空でなく、max_length文字以内であることを検査する"""

    def validate(value: _HasText) -> _HasText:
        _check_length(value.text, max_length)
        return value

    return AfterValidator(validate)


def string_length(max_length: int) -> AfterValidator:
    """文字列が空でなく、max_length文字以内であることを検査する"""

    def validate(value: str) -> str:
        _check_length(value, max_length)
        return value

    return AfterValidator(validate)


def item_count(
    max_items: int,
    *,
    exceeded: str = "element_count_exceeded",
    empty: str = "empty_elements",
    min_items: int = 1,
) -> AfterValidator:
    """シーケンスの要素数がmin_items以上max_items以下であることを検査する

    Args:
        max_items: 要素数の上限
        exceeded: 上限超過時のエラー種別
        empty: 下限未満のときのエラー種別
        min_items: 要素数の下限
    """

    def validate(value: tuple[Any, ...]) -> tuple[Any, ...]:
        if len(value) < min_items:
            raise PydanticCustomError(empty, "at least {min_items} item(s) required", {"min_items": min_items})
        if len(value) > max_items:
            raise PydanticCustomError(exceeded, "at most {max_items} item(s) allowed", {"max_items": max_items})
        return value

    return AfterValidator(validate)
