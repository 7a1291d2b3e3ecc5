# -*- coding: utf-8 -*-
"""
京东联盟 API 请求参数模型

同时接受下划线与驼峰两种字段名，如 page_size / pageSize。
"""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

Id = Union[int, str]


class _JdRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class JdMaterialSearchRequest(_JdRequest):
    """关键词商品查询 jd.union.open.goods.query"""

    keyword: str = ""
    page_index: Optional[int] = Field(default=None, validation_alias=AliasChoices("page_index", "pageIndex"))
    page_size: Optional[int] = Field(default=None, validation_alias=AliasChoices("page_size", "pageSize"))
    sort_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("sort_name", "sortName"),
        description="price / commissionShare / commission / inOrderCount30Days ...",
    )
    sort: Optional[str] = Field(default=None, description="asc / desc")
    has_coupon: Optional[bool] = Field(default=None, validation_alias=AliasChoices("has_coupon", "hasCoupon"))

    # 一二三级类目
    cid1: Optional[int] = None
    cid2: Optional[int] = None
    cid3: Optional[int] = None


class JdLinkConvertRequest(_JdRequest):
    """推广链接 jd.union.open.promotion.common.get"""

    material_id: Optional[Id] = Field(
        default=None,
        validation_alias=AliasChoices("material_id", "materialId"),
        description="推广物料 URL 或商品 ID",
    )
    union_id: Optional[Id] = Field(default=None, validation_alias=AliasChoices("union_id", "unionId"))
    position_id: Optional[Id] = Field(default=None, validation_alias=AliasChoices("position_id", "positionId"))
    auto_search: bool = Field(default=True, validation_alias=AliasChoices("auto_search", "autoSearch"))


class JdItemDetailRequest(_JdRequest):
    """SKU 查询 jd.union.open.goods.query"""

    sku_ids: Optional[Union[List[Id], Id]] = Field(
        default=None,
        validation_alias=AliasChoices("sku_ids", "skuIds", "sku_id"),
        description="多个 SKU 用列表或逗号分隔",
    )


__all__ = [
    "JdMaterialSearchRequest",
    "JdLinkConvertRequest",
    "JdItemDetailRequest",
]
