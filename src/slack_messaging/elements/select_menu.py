"""セレクトメニュー（単一選択・複数選択）

データソースごとに別クラスを用意せず、DataSourceで型を切り替える。
ワイヤ形式のtypeはデータソースから導出する（例: static_select, multi_users_select）。
データソースごとに使えるフィールドが異なり、使えないフィールドを指定すると構築時にエラーになる。
"""

from collections.abc import Iterator
from enum import StrEnum
from typing import Annotated, Any, ClassVar, Generic, Self, TypeVar

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer, model_validator
from pydantic_core import PydanticCustomError

from slack_messaging.composition import (
    ConfirmationDialog,
    ConversationFilter,
    Option,
    OptionGroup,
    PlainText,
    to_plain_text,
)
from slack_messaging.validation import BlockKitModel, Builder, item_count, text_length


class DataSource(StrEnum):
    """セレクトメニューの選択肢の取得元"""

    STATIC = "static"
    EXTERNAL = "external"
    USERS = "users"
    CONVERSATIONS = "conversations"
    CHANNELS = "channels"


# どのデータソースでも使えるフィールド
_COMMON_FIELDS = frozenset({"data_source", "action_id", "placeholder", "confirm", "focus_on_load"})


class _SelectMenuBase(BlockKitModel):
    type_template: ClassVar[str]
    common_fields: ClassVar[frozenset[str]] = _COMMON_FIELDS
    source_fields: ClassVar[dict[DataSource, frozenset[str]]]

    data_source: DataSource = Field(exclude=True)
    action_id: Annotated[str, Field(max_length=255)] | None = None
    placeholder: Annotated[PlainText, text_length(150)] | None = None
    confirm: ConfirmationDialog | None = None
    focus_on_load: bool | None = None
    options: Annotated[tuple[Option, ...], item_count(100, empty="empty_options")] | None = None
    option_groups: Annotated[tuple[OptionGroup, ...], item_count(100, empty="empty_options")] | None = None
    min_query_length: Annotated[int, Field(ge=0)] | None = None
    filter: ConversationFilter | None = None
    default_to_current_conversation: bool | None = None

    @property
    def type(self) -> str:
        """ワイヤ形式のtype"""
        return self.type_template.format(source=self.data_source.value)

    @model_serializer(mode="wrap")
    def _serialize_with_type(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {"type": self.type, **handler(self)}

    def _menu_options(self) -> Iterator[Option]:
        # options, option_groups, initial_option(s) に含まれる選択肢をすべて辿る
        for name in type(self).model_fields:
            value = getattr(self, name)
            for item in value if isinstance(value, tuple) else (value,):
                if isinstance(item, OptionGroup):
                    yield from item.options
                elif isinstance(item, Option):
                    yield item

    @model_validator(mode="after")
    def _check_data_source(self) -> Self:
        if any(not isinstance(opt.text, PlainText) for opt in self._menu_options()):
            raise PydanticCustomError("invalid_option_text", "option text in menus must be plain_text")
        allowed = self.source_fields[self.data_source]
        for name in type(self).model_fields:
            if name in self.common_fields or name in allowed:
                continue
            if getattr(self, name) is not None:
                raise PydanticCustomError(
                    "incompatible_data_source_options",
                    "{field} cannot be used with the {data_source} data source",
                    {"field": name, "data_source": self.data_source.value},
                )
        if self.data_source is DataSource.STATIC:
            if self.options is None and self.option_groups is None:
                raise PydanticCustomError("empty_options", "static menus require options or option_groups")
            if self.options is not None and self.option_groups is not None:
                raise PydanticCustomError("exclusive_fields", "options and option_groups cannot both be set")
        return self


class SelectMenu(_SelectMenuBase):
    """単一選択のセレクトメニュー"""

    type_template = "{source}_select"
    source_fields = {
        DataSource.STATIC: frozenset({"options", "option_groups", "initial_option"}),
        DataSource.EXTERNAL: frozenset({"initial_option", "min_query_length"}),
        DataSource.USERS: frozenset({"initial_user"}),
        DataSource.CONVERSATIONS: frozenset(
            {"initial_conversation", "default_to_current_conversation", "filter", "response_url_enabled"}
        ),
        DataSource.CHANNELS: frozenset({"initial_channel", "response_url_enabled"}),
    }

    initial_option: Option | None = None
    initial_user: str | None = None
    initial_conversation: str | None = None
    initial_channel: str | None = None
    response_url_enabled: bool | None = None

    @classmethod
    def builder(cls, data_source: DataSource) -> "SelectMenuBuilder":
        return SelectMenuBuilder(data_source)


class MultiSelectMenu(_SelectMenuBase):
    """複数選択のセレクトメニュー"""

    type_template = "multi_{source}_select"
    common_fields = _COMMON_FIELDS | {"max_selected_items"}
    source_fields = {
        DataSource.STATIC: frozenset({"options", "option_groups", "initial_options"}),
        DataSource.EXTERNAL: frozenset({"initial_options", "min_query_length"}),
        DataSource.USERS: frozenset({"initial_users"}),
        DataSource.CONVERSATIONS: frozenset({"initial_conversations", "default_to_current_conversation", "filter"}),
        DataSource.CHANNELS: frozenset({"initial_channels"}),
    }

    initial_options: tuple[Option, ...] | None = None
    initial_users: tuple[str, ...] | None = None
    initial_conversations: tuple[str, ...] | None = None
    initial_channels: tuple[str, ...] | None = None
    max_selected_items: Annotated[int, Field(ge=1)] | None = None

    @classmethod
    def builder(cls, data_source: DataSource) -> "MultiSelectMenuBuilder":
        return MultiSelectMenuBuilder(data_source)


MenuT = TypeVar("MenuT", bound=_SelectMenuBase)


class _SelectMenuBuilderBase(Builder[MenuT], Generic[MenuT]):
    def __init__(self, data_source: DataSource) -> None:
        super().__init__()
        self._fields["data_source"] = data_source

    def action_id(self, action_id: str | None) -> Self:
        return self._set("action_id", action_id)

    def placeholder(self, placeholder: str | PlainText) -> Self:
        return self._set("placeholder", to_plain_text(placeholder))

    def confirm(self, confirm: ConfirmationDialog | None) -> Self:
        return self._set("confirm", confirm)

    def focus_on_load(self, focus: bool = True) -> Self:
        return self._set("focus_on_load", focus)

    def option(self, option: Option) -> Self:
        return self._push("options", option)

    def options(self, options: list[Option]) -> Self:
        return self._set("options", list(options))

    def option_group(self, group: OptionGroup) -> Self:
        return self._push("option_groups", group)

    def min_query_length(self, length: int | None) -> Self:
        return self._set("min_query_length", length)

    def filter(self, conversation_filter: ConversationFilter | None) -> Self:
        return self._set("filter", conversation_filter)

    def default_to_current_conversation(self, value: bool = True) -> Self:
        return self._set("default_to_current_conversation", value)


class SelectMenuBuilder(_SelectMenuBuilderBase[SelectMenu]):
    model = SelectMenu

    def initial_option(self, option: Option | None) -> "SelectMenuBuilder":
        return self._set("initial_option", option)

    def initial_user(self, user_id: str | None) -> "SelectMenuBuilder":
        return self._set("initial_user", user_id)

    def initial_conversation(self, conversation_id: str | None) -> "SelectMenuBuilder":
        return self._set("initial_conversation", conversation_id)

    def initial_channel(self, channel_id: str | None) -> "SelectMenuBuilder":
        return self._set("initial_channel", channel_id)

    def response_url_enabled(self, enabled: bool = True) -> "SelectMenuBuilder":
        return self._set("response_url_enabled", enabled)


class MultiSelectMenuBuilder(_SelectMenuBuilderBase[MultiSelectMenu]):
    model = MultiSelectMenu

    def _push_or_clear(self, name: str, item: Any) -> "MultiSelectMenuBuilder":
        # 単一選択のsetterと同じく、Noneで未設定に戻す
        if item is None:
            return self._set(name, None)
        return self._push(name, item)

    def initial_option(self, option: Option | None) -> "MultiSelectMenuBuilder":
        """初期選択に選択肢を追加する（Noneならそれまでの初期選択をすべて解除する）"""
        return self._push_or_clear("initial_options", option)

    def initial_user(self, user_id: str | None) -> "MultiSelectMenuBuilder":
        return self._push_or_clear("initial_users", user_id)

    def initial_conversation(self, conversation_id: str | None) -> "MultiSelectMenuBuilder":
        return self._push_or_clear("initial_conversations", conversation_id)

    def initial_channel(self, channel_id: str | None) -> "MultiSelectMenuBuilder":
        return self._push_or_clear("initial_channels", channel_id)

    def max_selected_items(self, count: int | None) -> "MultiSelectMenuBuilder":
        return self._set("max_selected_items", count)
