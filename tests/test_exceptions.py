"""例外クラスのテスト"""

import pytest

from slack_messaging.exceptions import (
    BlockKitError,
    BlockKitValidationError,
    ElementCountExceededError,
    EmptyOptionsError,
    EmptyTextError,
    FieldCountExceededError,
    IncompatibleDataSourceOptionsError,
)


def test_block_kit_error_is_exception() -> None:
    """BlockKitErrorがExceptionを継承していること"""
    assert issubclass(BlockKitError, Exception)


def test_validation_error_inherits_block_kit_error() -> None:
    """BlockKitValidationErrorがBlockKitErrorを継承していること"""
    assert issubclass(BlockKitValidationError, BlockKitError)


@pytest.mark.parametrize(
    "error_class",
    [
        EmptyTextError,
        EmptyOptionsError,
        FieldCountExceededError,
        ElementCountExceededError,
        IncompatibleDataSourceOptionsError,
    ],
)
def test_specific_errors_inherit_validation_error(error_class: type[BlockKitValidationError]) -> None:
    """個別のエラーがBlockKitValidationErrorを継承していること"""
    assert issubclass(error_class, BlockKitValidationError)


def test_validation_error_stores_details() -> None:
    """BlockKitValidationErrorがモデル名とエラー詳細を保持すること"""
    errors = [{"type": "empty_text", "loc": ("text",), "msg": "text must not be empty"}]
    error = BlockKitValidationError("Invalid Button", "Button", errors)
    assert str(error) == "Invalid Button"
    assert error.model == "Button"
    assert error.errors == errors
    assert error.error_types == ["empty_text"]
