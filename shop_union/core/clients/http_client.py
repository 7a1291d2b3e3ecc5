"""
HTTP 传输层

平台客户端只依赖 HttpClient 协议：request(method, url, options) -> HttpResponse。
默认实现基于 requests，超时从 settings 读取。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol, Union

import requests
from loguru import logger

from shop_union.config import settings
from shop_union.core.errors import TransportError


@dataclass(frozen=True)
class HttpResponse:
    body: str
    status: int = 200
    headers: Mapping[str, Any] = field(default_factory=dict)


class HttpClient(Protocol):
    def request(
        self,
        method: str,
        url: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Union[HttpResponse, Mapping[str, Any]]:
        """
        发送请求

        Args:
            method: HTTP 方法
            url: 请求地址
            options: form_params 为表单参数，其余键由实现自行解释

        Raises:
            TransportError: 网络或连接失败
        """
        ...


class RequestsHttpClient:
    """基于 requests 的默认 HTTP 实现"""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        connect_timeout: Optional[float] = None,
    ):
        self._session = session or requests.Session()
        self._timeout = timeout if timeout is not None else settings.http_timeout
        self._connect_timeout = (
            connect_timeout if connect_timeout is not None else settings.http_connect_timeout
        )

    def request(
        self,
        method: str,
        url: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> HttpResponse:
        options = dict(options or {})
        kwargs: Dict[str, Any] = {}
        if "form_params" in options:
            kwargs["data"] = options.pop("form_params")
        if "headers" in options:
            kwargs["headers"] = options.pop("headers")
        if "query" in options:
            kwargs["params"] = options.pop("query")

        logger.debug(f"[RequestsHttpClient] {method} {url}")
        try:
            resp = self._session.request(
                method=method,
                url=url,
                timeout=(self._connect_timeout, self._timeout),
                **kwargs,
            )
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise TransportError(f"HTTP 请求超时: {url}", {"url": url}) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}", {"url": url}) from e

        return HttpResponse(
            body=resp.text,
            status=resp.status_code,
            headers=dict(resp.headers),
        )

    def close(self) -> None:
        self._session.close()


__all__ = ["HttpResponse", "HttpClient", "RequestsHttpClient"]
