from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    CONFIG_ERROR = "CONFIG_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    PLATFORM_ERROR = "PLATFORM_ERROR"


class ShopUnionException(Exception):
    def __init__(self, code: ErrorCode, message: str, details: Optional[dict] = None) -> None:
        super().__init__(message)
        self.error_code = code
        self.code = code
        self.message = message
        self.details = details or {}


class ConfigurationError(ShopUnionException):
    """平台凭据未配置，在发起网络请求之前抛出"""

    def __init__(self, message: str, details: Optional[dict] = None) -> None:
        super().__init__(ErrorCode.CONFIG_ERROR, message, details)


class ValidationError(ShopUnionException):
    """业务参数缺失或类型不合法，在签名之前抛出"""

    def __init__(self, message: str, details: Optional[dict] = None) -> None:
        super().__init__(ErrorCode.VALIDATION_ERROR, message, details)


class TransportError(ShopUnionException):
    """HTTP 层失败（网络、DNS、连接、非 2xx 状态），原始异常保留在 __cause__"""

    def __init__(self, message: str, details: Optional[dict] = None) -> None:
        super().__init__(ErrorCode.TRANSPORT_ERROR, message, details)


class ProtocolError(ShopUnionException):
    """响应体不是 JSON 对象"""

    def __init__(self, message: str, body: str = "") -> None:
        super().__init__(ErrorCode.PROTOCOL_ERROR, message, {"body": body})
        self.body = body


class PlatformError(ShopUnionException):
    """
    平台返回的业务错误

    与其他异常不同，code 为平台数字错误码，错误类别见 error_code。

    Attributes:
        code: 平台数字错误码（无法解析为整数时为 0），同 platform_code
        api_code: 平台原始错误码（字符串）
        raw_response: 完整的解码后响应
    """

    def __init__(
        self,
        message: str,
        code: int = 0,
        api_code: Optional[str] = None,
        raw_response: Any = None,
    ) -> None:
        super().__init__(
            ErrorCode.PLATFORM_ERROR,
            message,
            {"code": code, "api_code": api_code},
        )
        self.code = code
        self.platform_code = code
        self.api_code = api_code
        self.raw_response = raw_response


__all__ = [
    "ErrorCode",
    "ShopUnionException",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "ProtocolError",
    "PlatformError",
]
