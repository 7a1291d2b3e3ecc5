# -*- coding: utf-8 -*-
"""
多多进宝开放 API 客户端：物料搜索、链接转换、店铺搜索、商品详情
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from shop_union.config import PinduoduoConfig
from shop_union.core.config.constants import PinduoduoType
from shop_union.core.errors import ConfigurationError, PlatformError, ValidationError
from shop_union.service.rpc.base_union_api import (
    BaseUnionAPI,
    RequestParams,
    cap_page_size,
    drop_none,
    to_int,
)
from shop_union.utils.sign import SIGN_FIELD, PinduoduoSigner

from .schemas import (
    PinduoduoItemDetailRequest,
    PinduoduoLinkConvertRequest,
    PinduoduoMaterialSearchRequest,
    PinduoduoShopSearchRequest,
)

DATA_TYPE = "JSON"


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else [value]


def goods_list_param(goods_sign_list: Any, goods_id_list: Any) -> Optional[Tuple[str, List[Any]]]:
    """
    goods_sign_list 优先于 goods_id_list；标量转单元素列表，goods_id 统一转字符串

    Returns:
        (参数名, 列表)，两者都为空时返回 None
    """
    if goods_sign_list:
        return "goods_sign_list", _as_list(goods_sign_list)
    if goods_id_list:
        return "goods_id_list", [str(v) for v in _as_list(goods_id_list)]
    return None


class PinduoduoAPI(BaseUnionAPI):
    """多多进宝 API"""

    signer_class = PinduoduoSigner
    logger_prefix = "PinduoduoAPI"
    platform_name = "拼多多"

    @property
    def config(self) -> PinduoduoConfig:
        return self._config.pinduoduo

    def material_search(self, params: RequestParams = None) -> Dict[str, Any]:
        """物料搜索（商品搜索） - pdd.ddk.goods.search"""
        req = self._normalize_params(PinduoduoMaterialSearchRequest, params)
        request: Dict[str, Any] = {
            "keyword": req.keyword,
            "page": req.page if req.page is not None else 1,
            "page_size": cap_page_size(req.page_size),
        }
        if req.sort_type is not None:
            request["sort_type"] = req.sort_type
        if req.with_coupon is not None:
            request["with_coupon"] = req.with_coupon
        if req.cat_id:
            request["cat_id"] = req.cat_id
        request.update(drop_none({
            "opt_id": req.opt_id,
            "pid": req.pid,
            "custom_parameters": req.custom_parameters,
        }))
        return self.call(PinduoduoType.GOODS_SEARCH.value, request)

    def link_convert(self, params: RequestParams = None) -> Dict[str, Any]:
        """
        链接转换（生成推广链接） - pdd.ddk.goods.promotion.url.generate

        Raises:
            ValidationError: 未配置也未传入 pid，或未提供 goods_sign_list / goods_id_list
        """
        req = self._normalize_params(PinduoduoLinkConvertRequest, params)
        pid = req.pid or self.config.pid
        if not pid:
            raise ValidationError("拼多多转链需要配置 pid 或传入 pid")

        goods = goods_list_param(req.goods_sign_list, req.goods_id_list)
        if goods is None:
            raise ValidationError("链接转换需要提供 goods_sign_list 或 goods_id_list")

        request: Dict[str, Any] = {
            "p_id": pid,
            "generate_we_app": req.generate_we_app,
            goods[0]: goods[1],
        }
        request.update(drop_none({
            "generate_short_url": req.generate_short_url,
            "custom_parameters": req.custom_parameters,
        }))
        return self.call(PinduoduoType.PROMOTION_URL_GENERATE.value, request)

    def shop_search(self, params: RequestParams = None) -> Dict[str, Any]:
        """店铺搜索（店铺列表） - pdd.ddk.mall.list"""
        req = self._normalize_params(PinduoduoShopSearchRequest, params)
        request: Dict[str, Any] = {
            "page": req.page if req.page is not None else 1,
            "page_size": cap_page_size(req.page_size),
        }
        if req.keyword:
            request["keyword"] = req.keyword
        return self.call(PinduoduoType.MALL_LIST.value, request)

    def item_detail(self, params: RequestParams = None) -> Dict[str, Any]:
        """
        商品详情 - pdd.ddk.goods.detail

        Raises:
            ValidationError: 未提供 goods_sign_list / goods_id_list
        """
        req = self._normalize_params(PinduoduoItemDetailRequest, params)
        goods = goods_list_param(req.goods_sign_list, req.goods_id_list)
        if goods is None:
            raise ValidationError("商品详情需要提供 goods_sign_list 或 goods_id_list")

        request: Dict[str, Any] = {goods[0]: goods[1]}
        if req.pid:
            request["pid"] = req.pid
        return self.call(PinduoduoType.GOODS_DETAIL.value, request)

    def call(self, api_type: str, api_params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        统一调用拼多多开放平台

        公共参数与业务参数合并后整体签名、整体发送。

        Args:
            api_type: API 名称，如 pdd.ddk.goods.search
            api_params: 业务参数，列表值以紧凑 JSON 发送

        Returns:
            {type}_response 节点，不存在时返回完整响应
        """
        client_id = self.config.client_id
        client_secret = self.config.client_secret
        if client_id is None or client_secret is None:
            raise ConfigurationError("多多进宝未配置 client_id / client_secret")

        params: Dict[str, Any] = {
            "type": api_type,
            "client_id": client_id,
            "timestamp": str(int(self._clock())),
            "data_type": DATA_TYPE,
        }
        params.update(api_params or {})
        params[SIGN_FIELD] = self._signer.sign(client_secret, params)

        data = self._post_form(self.config.gateway, api_type, params)
        return self._parse_response(data, api_type)

    def _parse_response(self, data: Dict[str, Any], api_type: str) -> Dict[str, Any]:
        error = data.get("error_response")
        if error is not None:
            error = error if isinstance(error, dict) else {}
            error_code = error.get("error_code")
            message = error.get("error_msg")
            raise PlatformError(
                "Unknown error" if message is None else str(message),
                code=to_int(error_code),
                api_code="" if error_code is None else str(error_code),
                raw_response=data,
            )
        return self._unwrap(data, api_type)
