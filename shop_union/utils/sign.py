# -*- coding: utf-8 -*-
"""
联盟平台请求签名

三个平台都使用同一套 MD5 签名：
    参数按 key 字典序排序，跳过 sign 与空值，
    拼接为 secret + k1v1k2v2... + secret，取 MD5 大写十六进制。
差异仅在于非字符串值的转换规则（拼多多的布尔值与数组）。
"""
from __future__ import annotations

import hashlib
import json
from typing import Any, Iterator, Mapping, Tuple

SIGN_FIELD = "sign"


def to_compact_json(value: Any) -> str:
    """紧凑 JSON，无多余空格，保留原有 key 顺序"""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


class Signer:
    """
    签名器基类（淘宝/京东规则）

    非字符串值使用默认字符串转换。
    """

    def stringify(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        return str(value)

    def canonicalize(self, params: Mapping[str, Any]) -> Iterator[Tuple[str, str]]:
        """按 key 排序并过滤出参与签名的 (key, value) 对"""
        for key in sorted(params):
            value = params[key]
            if key == SIGN_FIELD or value is None or value == "":
                continue
            yield key, self.stringify(value)

    def sign(self, secret: str, params: Mapping[str, Any]) -> str:
        payload = secret + "".join(k + v for k, v in self.canonicalize(params)) + secret
        return hashlib.md5(payload.encode("utf-8")).hexdigest().upper()


class TaobaoSigner(Signer):
    """淘宝开放平台 sign_method=md5"""


class JdSigner(Signer):
    """京东开放平台 md5 签名，param_json 按其字符串值参与签名"""


class PinduoduoSigner(Signer):
    """拼多多开放平台签名：布尔值为 true/false，数组与对象为紧凑 JSON"""

    def stringify(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple, dict)):
            return to_compact_json(value)
        return super().stringify(value)


__all__ = [
    "SIGN_FIELD",
    "Signer",
    "TaobaoSigner",
    "JdSigner",
    "PinduoduoSigner",
    "to_compact_json",
]
