from enum import Enum


class Platform(str, Enum):
    """联盟平台枚举"""
    TAOBAO = "taobao"
    PINDUODUO = "pinduoduo"
    JD = "jd"


# 默认网关
TAOBAO_GATEWAY = "https://eco.taobao.com/router/rest"
PINDUODUO_GATEWAY = "https://gw-api.pinduoduo.com/router"
JD_GATEWAY = "https://api.jd.com/routerjson"


class TaobaoMethod(str, Enum):
    """淘宝联盟 API method"""
    MATERIAL_OPTIONAL = "taobao.tbk.dg.material.optional"
    TPWD_CONVERT = "taobao.tbk.sc.tpwd.convert"
    ITEM_COUPON_GET = "taobao.tbk.dg.item.coupon.get"
    OPTIMUS_MATERIAL = "taobao.tbk.dg.optimus.material"
    ITEM_INFO_GET = "taobao.tbk.item.info.get"


class PinduoduoType(str, Enum):
    """多多进宝 API type"""
    GOODS_SEARCH = "pdd.ddk.goods.search"
    PROMOTION_URL_GENERATE = "pdd.ddk.goods.promotion.url.generate"
    MALL_LIST = "pdd.ddk.mall.list"
    GOODS_DETAIL = "pdd.ddk.goods.detail"


class JdMethod(str, Enum):
    """京东联盟 API method"""
    GOODS_QUERY = "jd.union.open.goods.query"
    PROMOTION_COMMON_GET = "jd.union.open.promotion.common.get"


# 分页
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# 淘宝店铺物料默认 material_id
TAOBAO_SHOP_MATERIAL_ID = "4093"

# 非 JSON 响应在错误信息中保留的最大长度
BODY_SNIPPET_LENGTH = 200
