"""
頁面資料載入
在頁面渲染前呼叫 microCMS，失敗時記錄錯誤並回傳空結果
"""

import logging
from typing import Dict, Any, Optional

from ..services.microcms import MicroCMSClient
from ..utils.data_converter import transform_ryokan_for_info_card


logger = logging.getLogger(__name__)


MAIN_PAGE_LIMIT = 100

# 首頁地圖所需欄位
MAIN_PAGE_FIELDS = [
    "id", "name", "latitude", "longitude", "onsenArea", "description",
    "heroImage", "cover", "address", "phone",
    "openAirBath", "privateBath", "onsenRoom", "dayUse", "tattooFriendly", "dogFriendly",
]


def load_main_page(client: MicroCMSClient, draft_key: Optional[str] = None) -> Dict[str, Any]:
    """首頁：旅館列表與地圖項目"""
    try:
        response = client.get_ryokans(
            limit=MAIN_PAGE_LIMIT,
            fields=MAIN_PAGE_FIELDS,
            draft_key=draft_key or None
        )
        map_items = [transform_ryokan_for_info_card(ryokan) for ryokan in response.contents]
    except Exception as e:
        logger.error(f"Failed to fetch ryokans for main page: {e}")
        return {
            "ryokans": [],
            "map_items": []
        }

    return {
        "ryokans": response.contents,
        "map_items": map_items
    }


def load_ryokan_page(client: MicroCMSClient, content_id: str,
                     draft_key: Optional[str] = None) -> Dict[str, Any]:
    """旅館詳細頁（以 ID）"""
    try:
        ryokan = client.get_ryokan(content_id, draft_key=draft_key or None)
    except Exception as e:
        logger.error(f"Failed to fetch ryokan with ID {content_id}: {e}")
        return {"ryokan": None}

    return {"ryokan": ryokan}


def load_ryokan_by_slug_page(client: MicroCMSClient, slug: str,
                             draft_key: Optional[str] = None) -> Dict[str, Any]:
    """旅館詳細頁（以 slug），找不到時 ryokan 為 None"""
    try:
        ryokan = client.get_ryokan_by_slug(slug, draft_key=draft_key or None)
    except Exception as e:
        logger.error(f"Failed to fetch ryokan with slug {slug}: {e}")
        return {"ryokan": None}

    return {"ryokan": ryokan}
