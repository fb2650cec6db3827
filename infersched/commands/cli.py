"""infersched 命令行入口。"""

from __future__ import annotations

import typer

from infersched.commands.config import app as config_app

app = typer.Typer(
    name="infersched",
    help="推理调度服务配置工具",
    add_completion=False,
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


def main() -> None:
    """命令行入口。"""
    app()


if __name__ == "__main__":
    main()
