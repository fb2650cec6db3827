"""配置查看命令实现。

只输出解析后的配置，不接受任何配置项参数。
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table
import typer

from infersched.application.config import iter_fields, load_config
from infersched.application.config.sources import current_environ
from infersched.common.logging import setup_logging

console = Console()

SECRET_MASK = "******"
SECRET_FIELDS = {("redis", "password")}

app = typer.Typer(
    name="config",
    help="查看从环境变量解析出的配置",
    add_completion=False,
)


def _display(section: str, name: str, value: Any) -> Any:
    """敏感字段非空时打码。"""
    if (section, name) in SECRET_FIELDS and value:
        return SECRET_MASK
    return value


@app.command()
def show(
    as_json: bool = typer.Option(False, "--json", help="以 JSON 格式输出"),
    log_level: str = typer.Option("WARNING", "--log-level", help="日志级别"),
) -> None:
    """显示当前环境解析出的配置快照。

    示例:
        infersched config show
        infersched config show --json
    """
    setup_logging(log_level)
    try:
        config = load_config()

        if as_json:
            data: dict[str, dict[str, Any]] = {}
            for entry in iter_fields(config):
                data.setdefault(entry.section, {})[entry.name] = _display(entry.section, entry.name, entry.value)
            typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
            return

        table = Table(title="配置快照")
        table.add_column("分组", style="cyan", no_wrap=True)
        table.add_column("字段", style="green", no_wrap=True)
        table.add_column("环境变量", style="yellow", no_wrap=True)
        table.add_column("值", overflow="fold")
        for entry in iter_fields(config):
            table.add_row(
                entry.section,
                entry.name,
                entry.env_var,
                repr(_display(entry.section, entry.name, entry.value)),
            )
        console.print(table)
    except Exception as e:
        typer.echo(f"❌ 加载配置失败: {e}", err=True)
        raise typer.Exit(1) from e


@app.command()
def env() -> None:
    """列出所有识别的环境变量、默认值以及当前是否已设置。

    空字符串视为未设置。
    """
    environ = current_environ()
    table = Table(title="环境变量")
    table.add_column("环境变量", style="yellow", no_wrap=True)
    table.add_column("默认值", overflow="fold")
    table.add_column("已设置", no_wrap=True)
    for entry in iter_fields(load_config()):
        is_set = "✅" if environ.get(entry.env_var) else "-"
        table.add_row(entry.env_var, repr(entry.default), is_set)
    console.print(table)


__all__ = [
    "app",
]
