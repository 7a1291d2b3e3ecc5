# -*- coding: utf-8 -*-
"""
联盟平台 API 基类

负责三个平台共用的部分：请求参数归一化、表单构造、发送与 JSON 解码。
签名规则与响应信封由各平台子类实现。
"""
from __future__ import annotations

import json
import time
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar, Union

from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from shop_union.config import Config
from shop_union.core.clients.http_client import HttpClient
from shop_union.core.config.constants import (
    BODY_SNIPPET_LENGTH,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
)
from shop_union.core.errors import ProtocolError, ValidationError
from shop_union.utils.sign import Signer

M = TypeVar("M", bound=BaseModel)

RequestParams = Union[BaseModel, Mapping[str, Any], None]


def cap_page_size(page_size: Optional[int], default: int = DEFAULT_PAGE_SIZE) -> int:
    """缺省取默认值，超过上限截断为上限"""
    if page_size is None:
        return default
    return min(int(page_size), MAX_PAGE_SIZE)


def join_ids(value: Any) -> Any:
    """列表用逗号拼接，标量原样返回"""
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return value


def response_key(method: str) -> str:
    """taobao.tbk.item.info.get -> taobao_tbk_item_info_get_response"""
    return method.replace(".", "_") + "_response"


def first_present(data: Mapping[str, Any], *keys: str) -> Any:
    """依次取第一个非 None 的字段"""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def drop_none(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


class BaseUnionAPI:
    """联盟平台 API 基类"""

    signer_class: Type[Signer] = Signer
    logger_prefix: str = "BaseUnionAPI"
    platform_name: str = ""

    def __init__(
        self,
        config: Config,
        http: HttpClient,
        clock: Callable[[], float] = time.time,
    ):
        self._config = config
        self._http = http
        self._clock = clock
        self._signer = self.signer_class()

    @property
    def signer(self) -> Signer:
        return self._signer

    # ========== 请求参数 ==========

    @staticmethod
    def _normalize_params(model_cls: Type[M], params: RequestParams) -> M:
        """
        dict / 请求模型 / None 统一转换为请求模型，未声明的字段被忽略

        值为 None 的键视为未传，取默认值或下一个别名。
        """
        if params is None:
            params = {}
        if isinstance(params, model_cls):
            return params
        if isinstance(params, BaseModel):
            params = params.model_dump(exclude_none=True)
        if isinstance(params, Mapping):
            try:
                return model_cls.model_validate(drop_none(params))
            except PydanticValidationError as e:
                fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
                raise ValidationError(f"参数不合法: {fields}", {"errors": e.errors()}) from e
        raise TypeError(f"Unsupported params type: {type(params)}")

    def _now(self) -> str:
        """本地时间 YYYY-MM-DD HH:MM:SS"""
        return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(self._clock()))

    def _form_fields(self, params: Mapping[str, Any]) -> Dict[str, str]:
        """表单值与签名使用同一套字符串转换，None 不发送"""
        return {k: self._signer.stringify(v) for k, v in params.items() if v is not None}

    # ========== 发送与解码 ==========

    def _post_form(self, gateway: str, name: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        """
        以 application/x-www-form-urlencoded 发送到网关并解码响应

        Args:
            gateway: 平台网关
            name: method / type，仅用于日志
            params: 已签名的完整参数

        Returns:
            解码后的 JSON 对象

        Raises:
            TransportError: 由 HTTP 实现抛出，原样透传
            ProtocolError: 响应体不是 JSON 对象
        """
        logger.debug(f"[{self.logger_prefix}] POST {gateway} {name}")
        response = self._http.request("POST", gateway, {"form_params": self._form_fields(params)})
        body = response["body"] if isinstance(response, Mapping) else response.body
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        return self._decode(body)

    def _decode(self, body: Optional[str]) -> Dict[str, Any]:
        body = body or ""
        try:
            data = json.loads(body)
        except ValueError as e:
            raise ProtocolError(self._non_json_message(body), body) from e
        if not isinstance(data, dict):
            raise ProtocolError(self._non_json_message(body), body)
        logger.debug(f"[{self.logger_prefix}] Response keys: {list(data.keys())}")
        return data

    def _non_json_message(self, body: str) -> str:
        return f"{self.platform_name} API 返回非 JSON: {body[:BODY_SNIPPET_LENGTH]}"

    @staticmethod
    def _unwrap(data: Dict[str, Any], name: str) -> Any:
        payload = data.get(response_key(name))
        return data if payload is None else payload
