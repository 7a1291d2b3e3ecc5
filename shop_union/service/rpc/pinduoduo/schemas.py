# -*- coding: utf-8 -*-
"""
多多进宝 API 请求参数模型
"""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Id = Union[int, str]


class _PinduoduoRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class _GoodsListMixin(BaseModel):
    """goods_sign_list 与 goods_id_list 二选一，goods_sign_list 优先"""

    goods_sign_list: Optional[Union[List[Id], Id]] = None
    goods_id_list: Optional[Union[List[Id], Id]] = None


class PinduoduoMaterialSearchRequest(_PinduoduoRequest):
    """商品搜索 pdd.ddk.goods.search"""

    keyword: str = ""
    page: Optional[int] = None
    page_size: Optional[int] = None
    sort_type: Optional[int] = Field(default=None, description="0 综合排序，2 按佣金比率升序 ...")
    with_coupon: Optional[bool] = None
    cat_id: Optional[Id] = None
    opt_id: Optional[Id] = None
    pid: Optional[str] = None
    custom_parameters: Optional[str] = None


class PinduoduoLinkConvertRequest(_PinduoduoRequest, _GoodsListMixin):
    """推广链接生成 pdd.ddk.goods.promotion.url.generate"""

    pid: Optional[str] = Field(default=None, description="推广位，缺省取配置 pid")
    generate_we_app: bool = False
    generate_short_url: Optional[bool] = None
    custom_parameters: Optional[str] = None


class PinduoduoShopSearchRequest(_PinduoduoRequest):
    """店铺列表 pdd.ddk.mall.list"""

    keyword: Optional[str] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class PinduoduoItemDetailRequest(_PinduoduoRequest, _GoodsListMixin):
    """商品详情 pdd.ddk.goods.detail"""

    pid: Optional[str] = None


__all__ = [
    "PinduoduoMaterialSearchRequest",
    "PinduoduoLinkConvertRequest",
    "PinduoduoShopSearchRequest",
    "PinduoduoItemDetailRequest",
]
