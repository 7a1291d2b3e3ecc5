"""Tests for the platform signers."""

import hashlib

import pytest

from shop_union.utils.sign import JdSigner, PinduoduoSigner, Signer, TaobaoSigner, to_compact_json

ALL_SIGNERS = [TaobaoSigner, PinduoduoSigner, JdSigner]


def _md5_upper(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest().upper()


class TestSigner:
    """Behaviour shared by all three signers"""

    @pytest.mark.parametrize("signer_cls", ALL_SIGNERS)
    def test_known_value(self, signer_cls):
        """Signature is md5(secret + sorted k+v + secret) in upper hex"""
        params = {"method": "x.y", "app_key": "k", "timestamp": "2024-01-01 00:00:00"}
        expected = _md5_upper("sapp_keykmethodx.ytimestamp2024-01-01 00:00:00s")
        assert signer_cls().sign("s", params) == expected

    @pytest.mark.parametrize("signer_cls", ALL_SIGNERS)
    def test_insertion_order_does_not_matter(self, signer_cls):
        a = {"b": "2", "a": "1", "c": "3"}
        b = {"c": "3", "a": "1", "b": "2"}
        signer = signer_cls()
        assert signer.sign("secret", a) == signer.sign("secret", b)

    @pytest.mark.parametrize("signer_cls", ALL_SIGNERS)
    def test_deterministic(self, signer_cls):
        params = {"page": 1, "keyword": "手机"}
        signer = signer_cls()
        assert signer.sign("secret", params) == signer.sign("secret", dict(params))

    @pytest.mark.parametrize("signer_cls", ALL_SIGNERS)
    def test_sign_and_empty_values_excluded(self, signer_cls):
        signer = signer_cls()
        base = {"a": "1"}
        noisy = {"a": "1", "sign": "OLD", "empty": "", "missing": None}
        assert signer.sign("secret", noisy) == signer.sign("secret", base)

    @pytest.mark.parametrize("signer_cls", ALL_SIGNERS)
    def test_result_is_uppercase_hex(self, signer_cls):
        sig = signer_cls().sign("secret", {"a": "1"})
        assert len(sig) == 32
        assert sig == sig.upper()
        int(sig, 16)

    def test_integers_are_decimal_strings(self):
        assert Signer().sign("s", {"page": 10}) == Signer().sign("s", {"page": "10"})

    def test_keys_sorted_by_codepoint(self):
        pairs = list(Signer().canonicalize({"b": "2", "B": "1", "a": "3"}))
        assert [k for k, _ in pairs] == ["B", "a", "b"]

    def test_unicode_values_hashed_as_utf8(self):
        expected = _md5_upper("skeyword手机s")
        assert Signer().sign("s", {"keyword": "手机"}) == expected


class TestPinduoduoSigner:
    """Pinduoduo specific stringification"""

    def test_booleans_are_lowercase_literals(self):
        signer = PinduoduoSigner()
        assert signer.stringify(True) == "true"
        assert signer.stringify(False) == "false"
        expected = _md5_upper("sgenerate_we_appfalses")
        assert signer.sign("s", {"generate_we_app": False}) == expected

    def test_lists_are_compact_json(self):
        signer = PinduoduoSigner()
        assert signer.stringify(["a", "b"]) == '["a","b"]'
        expected = _md5_upper('sgoods_sign_list["s1"]s')
        assert signer.sign("s", {"goods_sign_list": ["s1"]}) == expected

    def test_dict_keeps_given_key_order(self):
        assert PinduoduoSigner().stringify({"z": 1, "a": 2}) == '{"z":1,"a":2}'

    def test_false_is_not_treated_as_empty(self):
        signer = PinduoduoSigner()
        assert signer.sign("s", {"flag": False}) != signer.sign("s", {})


class TestDefaultStringification:
    """Taobao / JD use plain string conversion"""

    @pytest.mark.parametrize("signer_cls", [TaobaoSigner, JdSigner])
    def test_non_string_values_use_str(self, signer_cls):
        assert signer_cls().stringify(2) == "2"
        assert signer_cls().stringify(True) == "True"

    def test_param_json_is_signed_as_string(self):
        param_json = to_compact_json({"goodsReqDTO": {"keyword": "手机", "pageIndex": 1}})
        assert param_json == '{"goodsReqDTO":{"keyword":"手机","pageIndex":1}}'
        expected = _md5_upper("sparam_json" + param_json + "s")
        assert JdSigner().sign("s", {"param_json": param_json}) == expected
