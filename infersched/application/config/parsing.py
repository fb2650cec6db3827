"""环境变量数值文本解析。

比 pydantic 的宽松模式更严格：不去除首尾空白，不接受数字分隔符 "_"，
整数不接受 "16.0" 这类写法，且必须落在 64 位有符号整数范围内。
解析失败统一抛出 ValueError，由调用方回退到默认值。
"""

from __future__ import annotations

import math
import re

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX_FLOAT_RE = re.compile(r"[+-]?0[xX][0-9a-fA-F]*\.?[0-9a-fA-F]*[pP][+-]?[0-9]+")
_INF_LITERALS = {"inf", "infinity"}


def parse_int_text(text: str) -> int:
    """解析十进制整数文本。

    Raises:
        ValueError: 文本不是合法整数或超出 int64 范围
    """
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"不是合法的整数: {text!r}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"整数超出 int64 范围: {text!r}")
    return value


def parse_float_text(text: str) -> float:
    """解析浮点数文本。

    支持十进制、指数形式、带 p 指数的十六进制以及 inf/infinity/nan。
    有限文本溢出为无穷大时视为解析失败。

    Raises:
        ValueError: 文本不是合法浮点数或超出范围
    """
    if not text.isascii() or "_" in text or text != text.strip():
        raise ValueError(f"不是合法的浮点数: {text!r}")

    if _HEX_FLOAT_RE.fullmatch(text):
        try:
            value = float.fromhex(text)
        except OverflowError as e:
            raise ValueError(f"浮点数超出范围: {text!r}") from e
    else:
        value = float(text)

    if math.isinf(value) and text.lstrip("+-").lower() not in _INF_LITERALS:
        raise ValueError(f"浮点数超出范围: {text!r}")
    return value


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "parse_float_text",
    "parse_int_text",
]
