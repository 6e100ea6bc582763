"""
microCMS 內容 API 客戶端
提供旅館列表、單筆查詢與 slug 查詢，並將 JSON 回應轉為資料模型
"""

import os
import logging
from typing import Dict, List, Optional, Any, Union
from dataclasses import dataclass
from urllib.parse import quote

import requests

from ..models.ryokan_models import Ryokan, RyokanListResponse


logger = logging.getLogger(__name__)


MICROCMS_SERVICE_DOMAIN = "00y7aqc3z0"
API_KEY_HEADER = "X-MICROCMS-API-KEY"
RYOKAN_ENDPOINT = "/ryokan"


class MicroCMSError(Exception):
    """microCMS 回傳非 2xx 狀態碼"""

    def __init__(self, status: int, status_text: str):
        self.status = status
        self.status_text = status_text
        super().__init__(f"MicroCMS API error: {status} {status_text}")


@dataclass
class MicroCMSConfig:
    """microCMS 連線配置"""
    service_domain: str = MICROCMS_SERVICE_DOMAIN
    api_key: Optional[str] = None
    timeout: float = 10.0

    def to_dict(self) -> Dict[str, Any]:
        # 不輸出 API 金鑰
        return {
            "service_domain": self.service_domain,
            "api_key_configured": bool(self.api_key),
            "timeout": self.timeout
        }

    @classmethod
    def from_env(cls) -> 'MicroCMSConfig':
        """從環境變數載入（僅限伺服器端）"""
        timeout = os.getenv("MICROCMS_TIMEOUT")
        return cls(
            api_key=os.getenv("MICROCMS_API_KEY") or None,
            timeout=float(timeout) if timeout else 10.0
        )


class MicroCMSClient:
    """
    microCMS API 客戶端

    未提供 API 金鑰時不送出認證標頭，只能讀取公開的端點。
    帶金鑰的客戶端只能在伺服器端建立，不可傳給瀏覽器。
    """

    def __init__(self, service_domain: str, api_key: Optional[str] = None,
                 timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.base_url = f"https://{service_domain}.microcms.io/api/v1"
        self.timeout = timeout
        # 自行建立的 session 由 close() 關閉
        self._owns_session = session is None
        self.session = session or requests.Session()

        headers = {"Content-Type": "application/json"}
        if api_key:
            headers[API_KEY_HEADER] = api_key
        self._headers = headers

    def close(self) -> None:
        """關閉自行建立的連線池"""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> 'MicroCMSClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    @staticmethod
    def _build_params(params: Optional[Dict[str, Any]]) -> Dict[str, str]:
        """略過 None，列表以逗號串接"""
        query: Dict[str, str] = {}
        if not params:
            return query

        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                value = ",".join(str(v) for v in value)
            query[key] = str(value)

        return query

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        發送 GET 請求並解析 JSON

        Args:
            endpoint: 端點路徑，例如 "/ryokan"
            params: 查詢參數

        Returns:
            解析後的 JSON（不做結構驗證）

        Raises:
            MicroCMSError: 非 2xx 狀態碼
            requests.RequestException: 連線失敗或逾時
        """
        url = f"{self.base_url}{endpoint}"
        query = self._build_params(params)

        logger.debug(f"GET {endpoint} params={sorted(query)}")
        response = self.session.get(url, params=query, headers=self.headers, timeout=self.timeout)

        if not response.ok:
            logger.warning(f"microCMS request to {endpoint} failed: {response.status_code} {response.reason}")
            raise MicroCMSError(response.status_code, response.reason)

        return response.json()

    def get_ryokans(self,
                    limit: Optional[int] = None,
                    offset: Optional[int] = None,
                    orders: Optional[Union[str, List[str]]] = None,
                    q: Optional[str] = None,
                    fields: Optional[Union[str, List[str]]] = None,
                    filters: Optional[str] = None,
                    draft_key: Optional[str] = None) -> RyokanListResponse:
        """獲取旅館列表（limit 上限由呼叫端負責）"""
        params = {
            "limit": limit,
            "offset": offset,
            "orders": orders,
            "q": q,
            "fields": fields,
            "filters": filters,
            "draftKey": draft_key
        }
        data = self.get(RYOKAN_ENDPOINT, params)
        return RyokanListResponse.from_dict(data)

    def get_ryokan(self,
                   content_id: str,
                   fields: Optional[Union[str, List[str]]] = None,
                   draft_key: Optional[str] = None) -> Ryokan:
        """以 ID 獲取單筆旅館，不存在時拋出 MicroCMSError"""
        params = {
            "fields": fields,
            "draftKey": draft_key
        }
        data = self.get(f"{RYOKAN_ENDPOINT}/{quote(content_id, safe='')}", params)
        return Ryokan.from_dict(data)

    def get_ryokan_by_slug(self, slug: str, draft_key: Optional[str] = None) -> Optional[Ryokan]:
        """以 slug 獲取旅館，找不到時回傳 None"""
        response = self.get_ryokans(
            filters=f"slug[equals]{slug}",
            limit=1,
            draft_key=draft_key
        )
        if not response.contents:
            return None
        return response.contents[0]


def create_microcms_client(api_key: Optional[str] = None,
                           config: Optional[MicroCMSConfig] = None,
                           session: Optional[requests.Session] = None) -> MicroCMSClient:
    """創建 microCMS 客戶端實例"""
    config = config or MicroCMSConfig()
    return MicroCMSClient(
        config.service_domain,
        api_key=api_key if api_key is not None else config.api_key,
        timeout=config.timeout,
        session=session
    )
