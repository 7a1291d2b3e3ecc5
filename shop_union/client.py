"""
电商联盟统一 SDK 入口

支持淘宝联盟、多多进宝、京东联盟的：
- 物料搜索 material_search
- 链接转换 link_convert
- 店铺搜索 shop_search
- 商品详情 item_detail

示例:
    config = Config({
        "taobao": {"app_key": "xx", "app_secret": "xx", "pid": "mm_xx_xx_xx"},
        "pinduoduo": {"client_id": "xx", "client_secret": "xx", "pid": "xx"},
        "jd": {"app_key": "xx", "app_secret": "xx", "union_id": "xx", "position_id": "xx"},
    })
    client = UnionClient(config)
    client.taobao().material_search({"keyword": "手机"})
    client.pinduoduo().link_convert({"goods_sign_list": ["xxx"]})
    client.jd().item_detail({"sku_ids": "100012345678"})
"""
from __future__ import annotations

import threading
import time
from typing import Callable, Dict, Optional, Type, Union

from loguru import logger

from shop_union.config import Config
from shop_union.core.clients.http_client import HttpClient, RequestsHttpClient
from shop_union.core.config.constants import Platform
from shop_union.service.rpc.base_union_api import BaseUnionAPI
from shop_union.service.rpc.jd.client import JdAPI
from shop_union.service.rpc.pinduoduo.client import PinduoduoAPI
from shop_union.service.rpc.taobao.client import TaobaoAPI

_CLIENT_CLASSES: Dict[Platform, Type[BaseUnionAPI]] = {
    Platform.TAOBAO: TaobaoAPI,
    Platform.PINDUODUO: PinduoduoAPI,
    Platform.JD: JdAPI,
}


class UnionClient:
    """
    三个平台客户端的门面

    平台客户端在首次访问时创建并缓存，之后每次返回同一实例。
    构造时不校验凭据，缺失的凭据在调用该平台接口时才报 ConfigurationError。
    """

    def __init__(
        self,
        config: Config,
        http: Optional[HttpClient] = None,
        clock: Callable[[], float] = time.time,
    ):
        self._config = config
        self._http = http or RequestsHttpClient()
        self._clock = clock
        self._clients: Dict[Platform, BaseUnionAPI] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> Config:
        return self._config

    def client(self, platform: Union[Platform, str]) -> BaseUnionAPI:
        """按平台获取客户端，platform 可为 Platform 或 taobao / pinduoduo / jd"""
        platform = Platform(platform)
        api = self._clients.get(platform)
        if api is None:
            with self._lock:
                api = self._clients.get(platform)
                if api is None:
                    api = _CLIENT_CLASSES[platform](self._config, self._http, clock=self._clock)
                    self._clients[platform] = api
                    logger.debug(f"[UnionClient] {platform.value} 客户端已创建")
        return api

    def taobao(self) -> TaobaoAPI:
        """淘宝联盟客户端（需配置 taobao.app_key / app_secret）"""
        return self.client(Platform.TAOBAO)

    def pinduoduo(self) -> PinduoduoAPI:
        """多多进宝客户端（需配置 pinduoduo.client_id / client_secret）"""
        return self.client(Platform.PINDUODUO)

    def jd(self) -> JdAPI:
        """京东联盟客户端（需配置 jd.app_key / app_secret）"""
        return self.client(Platform.JD)
