"""ブロック内に配置するインタラクティブ要素・表示要素"""

from slack_messaging.elements.button import Button, ButtonBuilder, ButtonStyle
from slack_messaging.elements.image import ImageElement
from slack_messaging.elements.inputs import (
    Checkboxes,
    CheckboxesBuilder,
    PlainTextInput,
    PlainTextInputBuilder,
    RadioButtonGroup,
    RadioButtonGroupBuilder,
)
from slack_messaging.elements.overflow import OverflowMenu, OverflowMenuBuilder
from slack_messaging.elements.pickers import (
    DatePicker,
    DatePickerBuilder,
    DatetimePicker,
    DatetimePickerBuilder,
    TimePicker,
    TimePickerBuilder,
)
from slack_messaging.elements.select_menu import (
    DataSource,
    MultiSelectMenu,
    MultiSelectMenuBuilder,
    SelectMenu,
    SelectMenuBuilder,
)

# actionsブロックに置ける要素
ActionsElement = (
    Button
    | Checkboxes
    | DatePicker
    | DatetimePicker
    | MultiSelectMenu
    | OverflowMenu
    | RadioButtonGroup
    | SelectMenu
    | TimePicker
)

# sectionブロックのaccessoryに置ける要素
AccessoryElement = (
    Button
    | Checkboxes
    | DatePicker
    | ImageElement
    | MultiSelectMenu
    | OverflowMenu
    | RadioButtonGroup
    | SelectMenu
    | TimePicker
)

# inputブロックに置ける要素
InputElement = (
    Checkboxes
    | DatePicker
    | DatetimePicker
    | MultiSelectMenu
    | PlainTextInput
    | RadioButtonGroup
    | SelectMenu
    | TimePicker
)

__all__ = [
    "AccessoryElement",
    "ActionsElement",
    "Button",
    "ButtonBuilder",
    "ButtonStyle",
    "Checkboxes",
    "CheckboxesBuilder",
    "DataSource",
    "DatePicker",
    "DatePickerBuilder",
    "DatetimePicker",
    "DatetimePickerBuilder",
    "ImageElement",
    "InputElement",
    "MultiSelectMenu",
    "MultiSelectMenuBuilder",
    "OverflowMenu",
    "OverflowMenuBuilder",
    "PlainTextInput",
    "PlainTextInputBuilder",
    "RadioButtonGroup",
    "RadioButtonGroupBuilder",
    "SelectMenu",
    "SelectMenuBuilder",
    "TimePicker",
    "TimePickerBuilder",
]
