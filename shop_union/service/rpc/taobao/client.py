# -*- coding: utf-8 -*-
"""
淘宝联盟开放 API 客户端：物料搜索、链接转换、店铺搜索、商品详情
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from shop_union.config import TaobaoConfig
from shop_union.core.config.constants import TaobaoMethod
from shop_union.core.errors import ConfigurationError, PlatformError, ValidationError
from shop_union.service.rpc.base_union_api import (
    BaseUnionAPI,
    RequestParams,
    cap_page_size,
    drop_none,
    first_present,
    join_ids,
    to_int,
)
from shop_union.utils.sign import SIGN_FIELD, TaobaoSigner

from .schemas import (
    TaobaoItemDetailRequest,
    TaobaoLinkConvertRequest,
    TaobaoMaterialSearchRequest,
    TaobaoShopSearchRequest,
)

API_VERSION = "2.0"
SIGN_METHOD = "md5"


def parse_adzone_id_from_pid(pid: Optional[str]) -> Optional[str]:
    """pid 格式: mm_123_456_789，最后一段为 adzone_id"""
    if pid is None:
        return None
    return pid.split("_")[-1] or None


def _flag(value: Optional[bool]) -> Optional[str]:
    if value is None:
        return None
    return "true" if value else "false"


class TaobaoAPI(BaseUnionAPI):
    """淘宝联盟 API"""

    signer_class = TaobaoSigner
    logger_prefix = "TaobaoAPI"
    platform_name = "淘宝"

    @property
    def config(self) -> TaobaoConfig:
        return self._config.taobao

    def _adzone_id(self, override: Any = None) -> Optional[str]:
        """显式传入 > 配置 adzone_id > 由 pid 解析"""
        if override:
            return str(override)
        if self.config.adzone_id is not None:
            return self.config.adzone_id
        return parse_adzone_id_from_pid(self.config.pid)

    def material_search(self, params: RequestParams = None) -> Dict[str, Any]:
        """物料搜索（全网淘客商品查询） - taobao.tbk.dg.material.optional"""
        req = self._normalize_params(TaobaoMaterialSearchRequest, params)
        api_params: Dict[str, Any] = {
            "adzone_id": self._adzone_id(req.adzone_id),
            "page_no": req.page_no if req.page_no is not None else 1,
            "page_size": cap_page_size(req.page_size),
            "sort": req.sort,
            "cat": req.cat,
            "itemloc": req.itemloc,
            "material_id": req.material_id,
            "has_coupon": _flag(req.has_coupon),
            "is_tmall": _flag(req.is_tmall),
            "is_overseas": _flag(req.is_overseas),
            "start_price": req.start_price,
            "end_price": req.end_price,
            "start_tk_rate": req.start_tk_rate,
            "end_tk_rate": req.end_tk_rate,
            "platform": req.platform,
            "ip": req.ip,
            "device_type": req.device_type,
            "device_value": req.device_value,
        }
        if req.keyword:
            api_params["q"] = req.keyword
        return self.call(TaobaoMethod.MATERIAL_OPTIONAL.value, drop_none(api_params))

    def link_convert(self, params: RequestParams = None) -> Dict[str, Any]:
        """
        链接转换（淘口令 / 商品 ID / 商品 URL 转推广链接）

        优先级: content(淘口令) > item_id(num_iid) > url

        Raises:
            ValidationError: 三者均未提供
        """
        req = self._normalize_params(TaobaoLinkConvertRequest, params)
        adzone_id = self._adzone_id(req.adzone_id)
        session = self.config.session

        if req.content:
            return self.call(TaobaoMethod.TPWD_CONVERT.value, {
                "adzone_id": adzone_id,
                "content": req.content,
                "session": session,
            })
        if req.item_id:
            return self.call(TaobaoMethod.ITEM_COUPON_GET.value, {
                "adzone_id": adzone_id,
                "item_id": req.item_id,
                "session": session,
            })
        if req.url:
            return self.call(TaobaoMethod.TPWD_CONVERT.value, {
                "adzone_id": adzone_id,
                "content": req.url,
                "session": session,
            })
        raise ValidationError("链接转换需要提供 item_id、content(淘口令) 或 url 之一")

    def shop_search(self, params: RequestParams = None) -> Dict[str, Any]:
        """店铺搜索（联盟店铺物料） - taobao.tbk.dg.optimus.material"""
        req = self._normalize_params(TaobaoShopSearchRequest, params)
        api_params: Dict[str, Any] = {
            "adzone_id": self._adzone_id(req.adzone_id),
            "page_no": req.page_no if req.page_no is not None else 1,
            "page_size": cap_page_size(req.page_size),
            "material_id": req.material_id,
        }
        if req.keyword:
            api_params["keyword"] = req.keyword
        return self.call(TaobaoMethod.OPTIMUS_MATERIAL.value, api_params)

    def item_detail(self, params: RequestParams = None) -> Dict[str, Any]:
        """
        商品详情 - taobao.tbk.item.info.get

        Raises:
            ValidationError: num_iids / item_id 均为空
        """
        req = self._normalize_params(TaobaoItemDetailRequest, params)
        num_iids = join_ids(req.num_iids)
        if not num_iids:
            raise ValidationError("商品详情需要提供 num_iids 或 item_id")
        return self.call(TaobaoMethod.ITEM_INFO_GET.value, drop_none({
            "num_iids": num_iids,
            "platform": req.platform,
            "ip": req.ip,
        }))

    def call(self, method: str, api_params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        统一调用淘宝开放平台

        Args:
            method: API 名称，如 taobao.tbk.dg.material.optional
            api_params: 业务参数

        Returns:
            {method}_response 节点，不存在时返回完整响应
        """
        app_key = self.config.app_key
        app_secret = self.config.app_secret
        if app_key is None or app_secret is None:
            raise ConfigurationError("淘宝联盟未配置 app_key / app_secret")

        public: Dict[str, Any] = {
            "method": method,
            "app_key": app_key,
            "timestamp": self._now(),
            "v": API_VERSION,
            "sign_method": SIGN_METHOD,
            "format": "json",
        }
        if self.config.session is not None:
            public["session"] = self.config.session

        request = {**public, **(api_params or {})}
        request[SIGN_FIELD] = self._signer.sign(app_secret, request)

        data = self._post_form(self.config.gateway, method, request)
        return self._parse_response(data, method)

    def _parse_response(self, data: Dict[str, Any], method: str) -> Dict[str, Any]:
        error = data.get("error_response")
        if error is not None:
            error = error if isinstance(error, dict) else {}
            message = first_present(error, "sub_msg", "msg")
            if message is None:
                message = "Unknown error"
            sub_code = error.get("sub_code")
            raise PlatformError(
                str(message),
                code=to_int(error.get("code")),
                api_code="" if sub_code is None else str(sub_code),
                raw_response=data,
            )
        return self._unwrap(data, method)
