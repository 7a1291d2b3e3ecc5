# -*- coding: utf-8 -*-
"""
淘宝联盟 API 请求参数模型
"""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from shop_union.core.config.constants import TAOBAO_SHOP_MATERIAL_ID

Id = Union[int, str]


class _TaobaoRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TaobaoMaterialSearchRequest(_TaobaoRequest):
    """物料搜索 taobao.tbk.dg.material.optional"""

    keyword: Optional[str] = Field(default=None, description="关键词，发送为 q")
    adzone_id: Optional[Id] = Field(default=None, description="推广位 ID，缺省取配置或由 pid 解析")
    page_no: Optional[int] = None
    page_size: Optional[int] = None

    # 筛选与排序
    sort: Optional[str] = Field(default=None, description="如 tk_rate_des / total_sales_des / price_asc")
    cat: Optional[str] = Field(default=None, description="后台类目 ID，多个逗号分隔")
    itemloc: Optional[str] = None
    material_id: Optional[Id] = None
    has_coupon: Optional[bool] = None
    is_tmall: Optional[bool] = None
    is_overseas: Optional[bool] = None
    start_price: Optional[int] = None
    end_price: Optional[int] = None
    start_tk_rate: Optional[int] = None
    end_tk_rate: Optional[int] = None
    platform: Optional[int] = Field(default=None, description="1 PC，2 无线")

    # 设备信息
    ip: Optional[str] = None
    device_type: Optional[str] = None
    device_value: Optional[str] = None


class TaobaoLinkConvertRequest(_TaobaoRequest):
    """链接转换：淘口令 content / 商品 item_id / 商品 url 三选一，按此优先级"""

    content: Optional[str] = None
    item_id: Optional[Id] = Field(default=None, validation_alias=AliasChoices("item_id", "num_iid"))
    url: Optional[str] = None
    adzone_id: Optional[Id] = None


class TaobaoShopSearchRequest(_TaobaoRequest):
    """店铺物料 taobao.tbk.dg.optimus.material"""

    keyword: Optional[str] = None
    adzone_id: Optional[Id] = None
    page_no: Optional[int] = None
    page_size: Optional[int] = None
    material_id: Id = TAOBAO_SHOP_MATERIAL_ID


class TaobaoItemDetailRequest(_TaobaoRequest):
    """商品详情 taobao.tbk.item.info.get"""

    num_iids: Optional[Union[List[Id], Id]] = Field(
        default=None,
        validation_alias=AliasChoices("num_iids", "item_id"),
        description="多个商品 ID 用列表或逗号分隔",
    )
    platform: int = 2
    ip: Optional[str] = None


__all__ = [
    "TaobaoMaterialSearchRequest",
    "TaobaoLinkConvertRequest",
    "TaobaoShopSearchRequest",
    "TaobaoItemDetailRequest",
]
