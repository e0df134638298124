"""日付・時刻ピッカー"""

import re
from datetime import date
from typing import Annotated, Literal

from pydantic import AfterValidator, Field
from pydantic_core import PydanticCustomError

from slack_messaging.composition import ConfirmationDialog, PlainText, to_plain_text
from slack_messaging.validation import BlockKitModel, Builder, text_length

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _check_date(value: str) -> str:
    try:
        # fromisoformatは"20230227"のような形式も受け付けるため、桁数も確認する
        if len(value) != 10:
            raise ValueError(value)
        date.fromisoformat(value)
    except ValueError:
        raise PydanticCustomError("invalid_format", "should be in the format YYYY-MM-DD") from None
    return value


def _check_time(value: str) -> str:
    if not _TIME_PATTERN.match(value):
        raise PydanticCustomError("invalid_format", "should be in the format HH:mm")
    return value


class DatePicker(BlockKitModel):
    """日付ピッカー"""

    type: Literal["datepicker"] = "datepicker"
    action_id: Annotated[str, Field(max_length=255)] | None = None
    initial_date: Annotated[str, AfterValidator(_check_date)] | None = None
    confirm: ConfirmationDialog | None = None
    focus_on_load: bool | None = None
    placeholder: Annotated[PlainText, text_length(150)] | None = None

    @classmethod
    def builder(cls) -> "DatePickerBuilder":
        return DatePickerBuilder()


class DatePickerBuilder(Builder[DatePicker]):
    model = DatePicker

    def action_id(self, action_id: str | None) -> "DatePickerBuilder":
        return self._set("action_id", action_id)

    def initial_date(self, initial_date: str | date | None) -> "DatePickerBuilder":
        if isinstance(initial_date, date):
            initial_date = initial_date.isoformat()
        return self._set("initial_date", initial_date)

    def confirm(self, confirm: ConfirmationDialog | None) -> "DatePickerBuilder":
        return self._set("confirm", confirm)

    def focus_on_load(self, focus: bool = True) -> "DatePickerBuilder":
        return self._set("focus_on_load", focus)

    def placeholder(self, placeholder: str | PlainText) -> "DatePickerBuilder":
        return self._set("placeholder", to_plain_text(placeholder))


class TimePicker(BlockKitModel):
    """時刻ピッカー"""

    type: Literal["timepicker"] = "timepicker"
    action_id: Annotated[str, Field(max_length=255)] | None = None
    initial_time: Annotated[str, AfterValidator(_check_time)] | None = None
    confirm: ConfirmationDialog | None = None
    focus_on_load: bool | None = None
    placeholder: Annotated[PlainText, text_length(150)] | None = None
    timezone: str | None = None

    @classmethod
    def builder(cls) -> "TimePickerBuilder":
        return TimePickerBuilder()


class TimePickerBuilder(Builder[TimePicker]):
    model = TimePicker

    def action_id(self, action_id: str | None) -> "TimePickerBuilder":
        return self._set("action_id", action_id)

    def initial_time(self, initial_time: str | None) -> "TimePickerBuilder":
        return self._set("initial_time", initial_time)

    def confirm(self, confirm: ConfirmationDialog | None) -> "TimePickerBuilder":
        return self._set("confirm", confirm)

    def focus_on_load(self, focus: bool = True) -> "TimePickerBuilder":
        return self._set("focus_on_load", focus)

    def placeholder(self, placeholder: str | PlainText) -> "TimePickerBuilder":
        return self._set("placeholder", to_plain_text(placeholder))

    def timezone(self, timezone: str | None) -> "TimePickerBuilder":
        return self._set("timezone", timezone)


class DatetimePicker(BlockKitModel):
    """日時ピッカー（initial_date_timeはUNIX秒、10桁）"""

    type: Literal["datetimepicker"] = "datetimepicker"
    action_id: Annotated[str, Field(max_length=255)] | None = None
    initial_date_time: Annotated[int, Field(ge=1_000_000_000, le=9_999_999_999)] | None = None
    confirm: ConfirmationDialog | None = None
    focus_on_load: bool | None = None

    @classmethod
    def builder(cls) -> "DatetimePickerBuilder":
        return DatetimePickerBuilder()


class DatetimePickerBuilder(Builder[DatetimePicker]):
    model = DatetimePicker

    def action_id(self, action_id: str | None) -> "DatetimePickerBuilder":
        return self._set("action_id", action_id)

    def initial_date_time(self, timestamp: int | None) -> "DatetimePickerBuilder":
        return self._set("initial_date_time", timestamp)

    def confirm(self, confirm: ConfirmationDialog | None) -> "DatetimePickerBuilder":
        return self._set("confirm", confirm)

    def focus_on_load(self, focus: bool = True) -> "DatetimePickerBuilder":
        return self._set("focus_on_load", focus)
