"""
地圖顯示模型
地圖標記、資訊卡與前端導覽用的常數
"""

from typing import Dict, List, Tuple, Any
from dataclasses import dataclass
from enum import Enum


class MapItemType(Enum):
    """地圖項目分類"""
    ONSEN = "onsen"
    RYOKAN = "ryokan"
    SPOT = "spot"


# 圖層按鈕「全て表示」
MAP_LAYER_ALL = "all"


@dataclass(frozen=True)
class MapItem:
    """地圖標記與資訊卡的顯示資料"""
    name: str
    pos: Tuple[float, float]
    type: MapItemType
    icon: str
    description: str
    details: str  # HTML 片段
    image: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "pos": list(self.pos),
            "type": self.type.value,
            "icon": self.icon,
            "description": self.description,
            "details": self.details,
            "image": self.image
        }


# 前端導覽
SECTIONS: List[Dict[str, str]] = [
    {"id": "onsen", "label": "湯場めぐり"},
    {"id": "ryokan", "label": "宿の案内"},
    {"id": "history", "label": "歴史の記憶"},
]

LANGUAGES: List[Dict[str, str]] = [
    {"id": "ja", "label": "日本語"},
    {"id": "zh", "label": "中文"},
    {"id": "en", "label": "EN"},
]

LAYER_BUTTONS: List[Dict[str, str]] = [
    {"id": MapItemType.ONSEN.value, "label": "温泉源泉"},
    {"id": MapItemType.RYOKAN.value, "label": "宿泊施設"},
    {"id": MapItemType.SPOT.value, "label": "名所・史跡"},
    {"id": MAP_LAYER_ALL, "label": "全て表示"},
]
