"""Tests for credential config and library settings."""

import pydantic
import pytest

from shop_union.config import Config, Settings, settings
from shop_union.core.config.constants import JD_GATEWAY, PINDUODUO_GATEWAY, TAOBAO_GATEWAY


class TestConfig:

    def test_has_platform_flags(self):
        config = Config({
            "taobao": {"app_key": "k", "app_secret": "s", "pid": "mm_1_2_3"},
            "pinduoduo": {"client_id": "c", "client_secret": "s"},
            "jd": {"app_key": "k", "app_secret": "s"},
        })
        assert config.has_taobao()
        assert config.has_pinduoduo()
        assert config.has_jd()

    def test_missing_secret_is_not_configured(self):
        config = Config({"taobao": {"app_key": "k"}, "jd": {"app_secret": "s"}})
        assert not config.has_taobao()
        assert not config.has_pinduoduo()
        assert not config.has_jd()

    def test_empty_string_counts_as_present(self):
        assert Config({"pinduoduo": {"client_id": "", "client_secret": ""}}).has_pinduoduo()

    def test_default_gateways(self):
        config = Config()
        assert config.taobao.gateway == TAOBAO_GATEWAY
        assert config.pinduoduo.gateway == PINDUODUO_GATEWAY
        assert config.jd.gateway == JD_GATEWAY

    def test_none_gateway_falls_back_to_default(self):
        assert Config({"jd": {"gateway": None}}).jd.gateway == JD_GATEWAY

    def test_gateway_override(self):
        config = Config({"taobao": {"gateway": "http://sandbox.local/router"}})
        assert config.taobao.gateway == "http://sandbox.local/router"

    def test_numeric_ids_coerced_to_str(self):
        config = Config({"taobao": {"adzone_id": 333}, "jd": {"union_id": 5001}})
        assert config.taobao.adzone_id == "333"
        assert config.jd.union_id == "5001"

    def test_unknown_keys_ignored(self):
        config = Config({"taobao": {"app_key": "k", "app_secret": "s", "foo": "bar"}})
        assert not hasattr(config.taobao, "foo")

    def test_platform_config_is_frozen(self):
        config = Config({"taobao": {"app_key": "k"}})
        with pytest.raises(pydantic.ValidationError):
            config.taobao.app_key = "other"

    def test_from_env(self):
        environ = {
            "TAOBAO_APP_KEY": "tk",
            "TAOBAO_APP_SECRET": "ts",
            "TAOBAO_PID": "mm_1_2_3",
            "PDD_CLIENT_ID": "pc",
            "JD_APP_KEY": "",
        }
        config = Config.from_env(environ)
        assert config.has_taobao()
        assert config.taobao.pid == "mm_1_2_3"
        assert config.pinduoduo.client_id == "pc"
        assert not config.has_pinduoduo()
        assert config.jd.app_key is None


class TestSettings:

    def test_singleton(self):
        assert Settings() is settings

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SHOP_UNION_HTTP_TIMEOUT", raising=False)
        assert settings.http_timeout == 30.0
        assert settings.http_connect_timeout == 10.0
        assert settings.log_file is None

    def test_env_override_is_typed(self, monkeypatch):
        monkeypatch.setenv("SHOP_UNION_HTTP_TIMEOUT", "5")
        monkeypatch.setenv("SHOP_UNION_LOG_LEVEL", "DEBUG")
        assert settings.http_timeout == 5.0
        assert isinstance(settings.http_timeout, float)
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("raw, expected", [("true", True), ("1", True), ("off", False), ("no", False)])
    def test_bool_setting_from_env(self, monkeypatch, raw, expected):
        monkeypatch.setenv("SHOP_UNION_LOG_COLORIZE", raw)
        assert settings.log_colorize is expected

    def test_bool_setting_default(self, monkeypatch):
        monkeypatch.delenv("SHOP_UNION_LOG_COLORIZE", raising=False)
        assert settings.log_colorize is True

    def test_unknown_setting_raises(self):
        with pytest.raises(AttributeError):
            settings.not_a_setting
