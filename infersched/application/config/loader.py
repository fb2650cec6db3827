"""配置加载入口。"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, NamedTuple

from infersched.common.logging import logger

from .settings import Config, EnvSettings
from .sources import env_name, use_environ


class FieldEntry(NamedTuple):
    """配置快照中的单个字段。"""

    section: str
    name: str
    env_var: str
    value: Any
    default: Any
    description: str | None


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """从环境变量加载配置快照。

    任何环境内容都不会导致异常：缺失、为空或无法解析的值均回退到默认值。

    Args:
        environ: 注入的环境映射。为 None 时读取 os.environ；
            提供映射时完全不读取真实进程环境。

    Returns:
        Config: 不可变的配置快照
    """
    with use_environ(environ):
        config = Config()
    logger.debug("配置加载完成")
    return config


def iter_fields(config: Config) -> Iterator[FieldEntry]:
    """按分组顺序遍历配置快照的所有字段。"""
    for section in type(config).model_fields:
        settings: EnvSettings = getattr(config, section)
        for name, field in type(settings).model_fields.items():
            yield FieldEntry(
                section=section,
                name=name,
                env_var=env_name(field, name),
                value=getattr(settings, name),
                default=field.get_default(call_default_factory=True),
                description=field.description,
            )


__all__ = [
    "FieldEntry",
    "iter_fields",
    "load_config",
]
