"""
測試共用 fixture
以假的 session 取代 requests.Session，回傳真正的 requests.Response
"""

import copy
import json

import pytest
import requests

from onsen_navigator.services.microcms import MicroCMSClient


def make_response(status_code=200, payload=None, reason="OK"):
    """建立 requests.Response"""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = json.dumps(payload if payload is not None else {}).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


class FakeSession:
    """記錄請求並依序回傳預設回應"""

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({
            "url": url,
            "params": params,
            "headers": headers,
            "timeout": timeout
        })
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    @property
    def last_call(self):
        return self.calls[-1]


RYOKAN_PAYLOAD = {
    "id": "kanaya-01",
    "createdAt": "2024-01-10T02:00:00.000Z",
    "updatedAt": "2024-02-01T02:00:00.000Z",
    "publishedAt": "2024-01-10T02:00:00.000Z",
    "revisedAt": "2024-02-01T02:00:00.000Z",
    "name": "金具屋",
    "slug": "kanaya",
    "onsenArea": {"name": "渋温泉"},
    "description": "登録有形文化財の木造四階建て",
    "heroImage": {"url": "https://images.microcms-assets.io/hero.jpg", "width": 1200, "height": 800},
    "cover": {"url": "https://images.microcms-assets.io/cover.jpg", "width": 800, "height": 600},
    "gallery": [
        {"url": "https://images.microcms-assets.io/g1.jpg", "width": 640, "height": 480},
        {"url": "https://images.microcms-assets.io/g2.jpg", "width": 640, "height": 480}
    ],
    "phone": "0269-33-3131",
    "address": "長野県下高井郡山ノ内町平穏2202",
    "openAirBath": True,
    "privateBath": True,
    "numberOfRooms": 29,
    "latitude": 36.7338,
    "longitude": 138.4447
}


@pytest.fixture
def ryokan_payload():
    """單筆旅館 JSON"""
    return copy.deepcopy(RYOKAN_PAYLOAD)


@pytest.fixture
def list_payload(ryokan_payload):
    """列表 API JSON"""
    second = copy.deepcopy(ryokan_payload)
    second.update({"id": "ichinoyu-02", "name": "一乃湯", "slug": "ichinoyu"})
    return {
        "contents": [ryokan_payload, second],
        "totalCount": 2,
        "offset": 0,
        "limit": 10
    }


@pytest.fixture
def make_client():
    """以假 session 建立客戶端"""
    def _make(responses=None, error=None, api_key="test-key"):
        session = FakeSession(responses=responses, error=error)
        client = MicroCMSClient("testservice", api_key=api_key, timeout=5, session=session)
        return client, session
    return _make
