# -*- coding: utf-8 -*-
"""
电商联盟统一 SDK：淘宝联盟、多多进宝、京东联盟
"""
from loguru import logger

from shop_union.client import UnionClient
from shop_union.config import Config, JdConfig, PinduoduoConfig, TaobaoConfig
from shop_union.core.clients.http_client import HttpClient, HttpResponse, RequestsHttpClient
from shop_union.core.config.constants import Platform
from shop_union.core.errors import (
    ConfigurationError,
    ErrorCode,
    PlatformError,
    ProtocolError,
    ShopUnionException,
    TransportError,
    ValidationError,
)
from shop_union.service.rpc.jd.client import JdAPI
from shop_union.service.rpc.pinduoduo.client import PinduoduoAPI
from shop_union.service.rpc.taobao.client import TaobaoAPI, parse_adzone_id_from_pid
from shop_union.utils.logging import setup_logging
from shop_union.utils.sign import JdSigner, PinduoduoSigner, Signer, TaobaoSigner

# 库默认不输出日志
logger.disable("shop_union")

__version__ = "0.1.0"

__all__ = [
    # 入口
    "UnionClient",
    "Platform",
    # 配置
    "Config",
    "TaobaoConfig",
    "PinduoduoConfig",
    "JdConfig",
    # 平台客户端
    "TaobaoAPI",
    "PinduoduoAPI",
    "JdAPI",
    "parse_adzone_id_from_pid",
    # 签名
    "Signer",
    "TaobaoSigner",
    "PinduoduoSigner",
    "JdSigner",
    # HTTP
    "HttpClient",
    "HttpResponse",
    "RequestsHttpClient",
    # 异常
    "ErrorCode",
    "ShopUnionException",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "ProtocolError",
    "PlatformError",
    "setup_logging",
]
