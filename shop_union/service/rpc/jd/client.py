# -*- coding: utf-8 -*-
"""
京东联盟开放 API 客户端：物料搜索、链接转换、店铺搜索、商品详情

业务参数整体序列化为 JSON 放在 param_json 字段中，param_json 以字符串参与签名。
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from shop_union.config import JdConfig
from shop_union.core.config.constants import JdMethod
from shop_union.core.errors import ConfigurationError, PlatformError, ValidationError
from shop_union.service.rpc.base_union_api import (
    BaseUnionAPI,
    RequestParams,
    cap_page_size,
    first_present,
    join_ids,
    response_key,
    to_int,
)
from shop_union.utils.sign import SIGN_FIELD, JdSigner, to_compact_json

from .schemas import JdItemDetailRequest, JdLinkConvertRequest, JdMaterialSearchRequest

API_VERSION = "1.0"


def jd_response_keys(method: str) -> Tuple[str, str]:
    """京东网关实际返回的后缀拼写为 _responce，两种都要尝试"""
    key = response_key(method)
    return key, key[: -len("response")] + "responce"


class JdAPI(BaseUnionAPI):
    """京东联盟 API"""

    signer_class = JdSigner
    logger_prefix = "JdAPI"
    platform_name = "京东"

    @property
    def config(self) -> JdConfig:
        return self._config.jd

    def material_search(self, params: RequestParams = None) -> Dict[str, Any]:
        """物料搜索（关键词商品查询） - jd.union.open.goods.query"""
        req = self._normalize_params(JdMaterialSearchRequest, params)
        goods_req: Dict[str, Any] = {
            "keyword": req.keyword,
            "pageIndex": req.page_index if req.page_index is not None else 1,
            "pageSize": cap_page_size(req.page_size),
        }
        if req.sort_name is not None:
            goods_req["sortName"] = req.sort_name
        if req.sort is not None:
            goods_req["sort"] = req.sort
        if req.has_coupon is not None:
            goods_req["hasCoupon"] = req.has_coupon
        # 类目只发送有值的层级
        for name in ("cid1", "cid2", "cid3"):
            value = getattr(req, name)
            if value:
                goods_req[name] = value
        return self.call(JdMethod.GOODS_QUERY.value, {"goodsReqDTO": goods_req})

    def link_convert(self, params: RequestParams = None) -> Dict[str, Any]:
        """
        链接转换（获取推广链接） - jd.union.open.promotion.common.get

        Raises:
            ValidationError: 未提供 material_id
        """
        req = self._normalize_params(JdLinkConvertRequest, params)
        if not req.material_id:
            raise ValidationError("京东转链需要提供 material_id（推广物料 URL 或商品 ID）")
        promotion_req = {
            "materialId": req.material_id,
            "unionId": req.union_id if req.union_id is not None else self.config.union_id,
            "positionId": req.position_id if req.position_id is not None else self.config.position_id,
            "autoSearch": req.auto_search,
        }
        return self.call(JdMethod.PROMOTION_COMMON_GET.value, {"promotionCodeReq": promotion_req})

    def shop_search(self, params: RequestParams = None) -> Dict[str, Any]:
        """
        店铺搜索

        京东联盟以商品搜索为主，暂无独立店铺接口，等同于 material_search。
        """
        return self.material_search(params)

    def item_detail(self, params: RequestParams = None) -> Dict[str, Any]:
        """
        商品详情（根据 SKU 查询） - jd.union.open.goods.query

        Raises:
            ValidationError: 未提供 sku_ids
        """
        req = self._normalize_params(JdItemDetailRequest, params)
        sku_ids = join_ids(req.sku_ids)
        if not sku_ids:
            raise ValidationError("京东商品详情需要提供 sku_ids")
        return self.call(JdMethod.GOODS_QUERY.value, {"goodsReqDTO": {"skuIds": sku_ids}})

    def call(self, method: str, api_params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        统一调用京东开放平台（JSON 格式）

        Args:
            method: API 名称，如 jd.union.open.goods.query
            api_params: 业务参数，如 {"goodsReqDTO": {...}}

        Returns:
            {method}_response 节点，不存在时返回完整响应
        """
        app_key = self.config.app_key
        app_secret = self.config.app_secret
        if app_key is None or app_secret is None:
            raise ConfigurationError("京东联盟未配置 app_key / app_secret")

        request: Dict[str, Any] = {
            "method": method,
            "app_key": app_key,
            "timestamp": self._now(),
            "format": "json",
            "v": API_VERSION,
            "param_json": to_compact_json(dict(api_params or {})),
        }
        request[SIGN_FIELD] = self._signer.sign(app_secret, request)

        data = self._post_form(self.config.gateway, method, request)
        return self._parse_response(data, method)

    def _parse_response(self, data: Dict[str, Any], method: str) -> Dict[str, Any]:
        payload: Any = None
        for key in jd_response_keys(method):
            if data.get(key) is not None:
                payload = data[key]
                break

        if payload is None:
            # 网关级错误（签名错误、app_key 无效等）没有业务节点
            error = data.get("error_response")
            if isinstance(error, dict):
                code = error.get("code")
                message = first_present(error, "zh_desc", "en_desc", "msg")
                raise PlatformError(
                    "" if message is None else str(message),
                    code=to_int(code),
                    api_code="" if code is None else str(code),
                    raw_response=data,
                )
            payload = data

        if not isinstance(payload, dict):
            return payload

        code = first_present(payload, "code", "errorCode")
        if code is None:
            code = 0
        if code != 0 and code != "0":
            message = first_present(payload, "message", "errorMessage")
            raise PlatformError(
                "" if message is None else str(message),
                code=to_int(code),
                api_code=str(code),
                raw_response=data,
            )
        return payload
