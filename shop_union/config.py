"""
配置管理模块

- Settings: SDK 自身的运行配置（超时、日志），基于环境变量，
  使用 __getattr__ 动态代理，新增配置只需在 _DEFAULTS 中添加一行。
- Config: 三个联盟平台的凭据配置，构造后不可变。
"""
from __future__ import annotations

import os
import threading
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from shop_union.core.config.constants import (
    JD_GATEWAY,
    PINDUODUO_GATEWAY,
    TAOBAO_GATEWAY,
)

if TYPE_CHECKING:

    class Settings:
        """类型存根 - 仅用于 IDE 静态分析"""

        # HTTP 配置
        http_timeout: float
        http_connect_timeout: float
        # 日志配置
        log_level: str
        log_format: str
        log_colorize: bool
        log_file: Optional[str]
        log_rotation: str
        log_retention: str


ENV_PREFIX = "SHOP_UNION_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings:
    """
    配置类 - 从环境变量读取，变量名为 SHOP_UNION_ + 大写配置名

    类型转换基于默认值类型自动推断。
    """

    _DEFAULTS: Dict[str, Any] = {
        # HTTP 配置
        "http_timeout": 30.0,
        "http_connect_timeout": 10.0,
        # 日志配置
        "log_level": "INFO",
        "log_format": "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        "log_colorize": True,
        "log_file": None,
        "log_rotation": "100 MB",
        "log_retention": "10 days",
    }

    _instance: Optional["Settings"] = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __getattr__(self, name: str) -> Any:
        """动态获取配置值"""
        if name.startswith("_") or name not in self._DEFAULTS:
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

        default = self._DEFAULTS[name]
        raw = os.environ.get(ENV_PREFIX + name.upper())
        if raw is None or raw == "":
            return default

        if isinstance(default, bool):
            return raw.strip().lower() in _TRUE_VALUES
        if isinstance(default, float):
            return float(raw)
        return raw


class _PlatformConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_str(cls, value: Any) -> Any:
        # 推广位等 ID 允许以数字形式传入
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class TaobaoConfig(_PlatformConfig):
    """淘宝联盟配置"""

    app_key: Optional[str] = None
    app_secret: Optional[str] = None
    # 推广位 pid，格式 mm_<a>_<b>_<adzone>
    pid: Optional[str] = None
    adzone_id: Optional[str] = None
    # 部分接口需要会员授权
    session: Optional[str] = None
    gateway: str = TAOBAO_GATEWAY

    @property
    def configured(self) -> bool:
        return self.app_key is not None and self.app_secret is not None


class PinduoduoConfig(_PlatformConfig):
    """多多进宝配置"""

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    pid: Optional[str] = None
    access_token: Optional[str] = None
    gateway: str = PINDUODUO_GATEWAY

    @property
    def configured(self) -> bool:
        return self.client_id is not None and self.client_secret is not None


class JdConfig(_PlatformConfig):
    """京东联盟配置"""

    app_key: Optional[str] = None
    app_secret: Optional[str] = None
    union_id: Optional[str] = None
    position_id: Optional[str] = None
    gateway: str = JD_GATEWAY

    @property
    def configured(self) -> bool:
        return self.app_key is not None and self.app_secret is not None


# 环境变量名 -> 配置字段
_ENV_MAPPING: Dict[str, Dict[str, str]] = {
    "taobao": {
        "app_key": "TAOBAO_APP_KEY",
        "app_secret": "TAOBAO_APP_SECRET",
        "pid": "TAOBAO_PID",
        "adzone_id": "TAOBAO_ADZONE_ID",
        "session": "TAOBAO_SESSION",
        "gateway": "TAOBAO_GATEWAY",
    },
    "pinduoduo": {
        "client_id": "PDD_CLIENT_ID",
        "client_secret": "PDD_CLIENT_SECRET",
        "pid": "PDD_PID",
        "access_token": "PDD_ACCESS_TOKEN",
        "gateway": "PDD_GATEWAY",
    },
    "jd": {
        "app_key": "JD_APP_KEY",
        "app_secret": "JD_APP_SECRET",
        "union_id": "JD_UNION_ID",
        "position_id": "JD_POSITION_ID",
        "gateway": "JD_GATEWAY",
    },
}


def _present(section: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    # None 等同于未配置，网关回落到默认值
    return {k: v for k, v in (section or {}).items() if v is not None}


class Config:
    """
    联盟平台凭据配置

    示例:
        config = Config({
            "taobao": {"app_key": "xx", "app_secret": "xx", "pid": "mm_xx_xx_xx"},
            "pinduoduo": {"client_id": "xx", "client_secret": "xx", "pid": "xx"},
            "jd": {"app_key": "xx", "app_secret": "xx", "union_id": "xx", "position_id": "xx"},
        })
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        options = options or {}
        self._taobao = TaobaoConfig.model_validate(_present(options.get("taobao")))
        self._pinduoduo = PinduoduoConfig.model_validate(_present(options.get("pinduoduo")))
        self._jd = JdConfig.model_validate(_present(options.get("jd")))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """从环境变量构造配置，未设置或为空的变量视为未配置"""
        environ = os.environ if environ is None else environ
        options: Dict[str, Dict[str, str]] = {}
        for platform, fields in _ENV_MAPPING.items():
            options[platform] = {
                field: environ[env_name]
                for field, env_name in fields.items()
                if environ.get(env_name)
            }
        return cls(options)

    @property
    def taobao(self) -> TaobaoConfig:
        return self._taobao

    @property
    def pinduoduo(self) -> PinduoduoConfig:
        return self._pinduoduo

    @property
    def jd(self) -> JdConfig:
        return self._jd

    def has_taobao(self) -> bool:
        return self._taobao.configured

    def has_pinduoduo(self) -> bool:
        return self._pinduoduo.configured

    def has_jd(self) -> bool:
        return self._jd.configured


# 全局配置实例
settings = Settings()
