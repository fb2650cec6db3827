"""环境变量配置源。

pydantic-settings 自定义配置源：按字段的 validation_alias 精确匹配环境变量名，
空字符串视为未设置。

环境来源默认为 os.environ，也可以通过 use_environ 在当前上下文中注入
任意映射（测试或嵌入场景），此时不会读取真实进程环境。
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
import os
from typing import Any

from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

_environ: ContextVar[Mapping[str, str] | None] = ContextVar("infersched_environ", default=None)


def current_environ() -> Mapping[str, str]:
    """获取当前上下文的环境映射（未注入时为 os.environ）。"""
    environ = _environ.get()
    return os.environ if environ is None else environ


@contextmanager
def use_environ(environ: Mapping[str, str] | None) -> Iterator[Mapping[str, str]]:
    """在当前上下文中注入环境映射。

    基于 ContextVar，不同线程或协程之间互不影响。

    Args:
        environ: 环境映射，None 表示使用 os.environ
    """
    token = _environ.set(environ)
    try:
        yield current_environ()
    finally:
        _environ.reset(token)


def env_name(field: FieldInfo, field_name: str) -> str:
    """字段对应的环境变量名。"""
    alias = field.validation_alias
    return alias if isinstance(alias, str) else field_name


class EnvironSettingsSource(PydanticBaseSettingsSource):
    """从环境映射读取配置的配置源。"""

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self.environ = current_environ()

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        key = env_name(field, field_name)
        return self.environ.get(key), key, False

    def __call__(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, field_name)
            # 空字符串等同于未设置
            if value:
                data[key] = value
        return data


__all__ = [
    "EnvironSettingsSource",
    "current_environ",
    "env_name",
    "use_environ",
]
