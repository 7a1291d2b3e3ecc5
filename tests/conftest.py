"""Shared fixtures for the shop_union test suite."""

import hashlib
import json
from typing import Any, Dict, List, Optional

import pytest

from shop_union.config import Config
from shop_union.core.clients.http_client import HttpResponse

FIXED_TIME = 1700000000.0


class RecordingHttpClient:
    """Fake HTTP capability: records requests and replays queued responses."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self._responses: List[Any] = []

    def queue(self, body: Any, status: int = 200) -> None:
        if not isinstance(body, (str, Exception)):
            body = json.dumps(body)
        self._responses.append((body, status))

    def request(self, method: str, url: str, options: Optional[Dict[str, Any]] = None):
        self.calls.append({"method": method, "url": url, "options": options or {}})
        body, status = self._responses.pop(0) if self._responses else ("{}", 200)
        if isinstance(body, Exception):
            raise body
        return HttpResponse(body=body, status=status, headers={})

    @property
    def last_form(self) -> Dict[str, str]:
        return self.calls[-1]["options"]["form_params"]


def md5_sign(secret: str, fields: Dict[str, str]) -> str:
    """Independent reference implementation of the union md5 signature."""
    parts = [secret]
    for key in sorted(fields):
        value = fields[key]
        if key == "sign" or value is None or value == "":
            continue
        parts.append(f"{key}{value}")
    parts.append(secret)
    return hashlib.md5("".join(parts).encode("utf-8")).hexdigest().upper()


@pytest.fixture
def fake_http():
    return RecordingHttpClient()


@pytest.fixture
def clock():
    return lambda: FIXED_TIME


@pytest.fixture
def config():
    return Config({
        "taobao": {
            "app_key": "tb_key",
            "app_secret": "tb_secret",
            "pid": "mm_111_222_333",
        },
        "pinduoduo": {
            "client_id": "pdd_client",
            "client_secret": "pdd_secret",
            "pid": "1001_2002",
        },
        "jd": {
            "app_key": "jd_key",
            "app_secret": "jd_secret",
            "union_id": "5001",
            "position_id": "6001",
        },
    })
