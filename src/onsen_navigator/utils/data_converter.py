"""
資料轉換工具
將 microCMS 旅館紀錄轉換為地圖資訊卡的顯示資料
"""

from html import escape
from typing import List, Iterable

from ..models.ryokan_models import Ryokan
from ..models.map_models import MapItem, MapItemType, MAP_LAYER_ALL


# 資訊卡顯示順序，依序檢查
KEY_FACILITIES = [
    ("open_air_bath", "露天風呂"),
    ("private_bath", "貸切風呂"),
    ("onsen_room", "温泉付き客室"),
    ("day_use", "日帰り入浴"),
    ("tattoo_friendly", "タトゥーOK"),
    ("dog_friendly", "ペットOK"),
]

MAX_KEY_FACILITIES = 3
FACILITY_SEPARATOR = " • "
RYOKAN_ICON = "🏮"


def select_key_facilities(ryokan: Ryokan) -> List[str]:
    """挑選最多三項主要設施標籤"""
    labels = [label for attr, label in KEY_FACILITIES if getattr(ryokan, attr)]
    return labels[:MAX_KEY_FACILITIES]


def select_image_url(ryokan: Ryokan) -> str:
    """主圖 > 封面 > 空字串"""
    if ryokan.hero_image and ryokan.hero_image.url:
        return ryokan.hero_image.url
    if ryokan.cover and ryokan.cover.url:
        return ryokan.cover.url
    return ""


def _text(value) -> str:
    if value is None:
        return ""
    return escape(str(value))


def build_details_html(ryokan: Ryokan) -> str:
    """組合資訊卡的 HTML 片段"""
    area_name = ryokan.onsen_area.name if ryokan.onsen_area else None
    facilities = FACILITY_SEPARATOR.join(escape(label) for label in select_key_facilities(ryokan))

    phone_html = ""
    if ryokan.phone:
        phone_html = f'<div class="phone">📞 {_text(ryokan.phone)}</div>'

    return (
        f'<div class="onsen-area">♨️ {_text(area_name)}</div>'
        f'<div class="facilities">{facilities}</div>'
        '<div class="contact">'
        f'<div class="address">📍 {_text(ryokan.address)}</div>'
        f'{phone_html}'
        '</div>'
    )


def transform_ryokan_for_info_card(ryokan: Ryokan) -> MapItem:
    """
    將旅館紀錄轉換為地圖項目

    純函數：相同輸入必定得到相同輸出，不做任何 I/O。

    Args:
        ryokan: microCMS 旅館紀錄

    Returns:
        MapItem（type 固定為 ryokan）
    """
    return MapItem(
        name=ryokan.name or "",
        pos=(ryokan.latitude, ryokan.longitude),
        type=MapItemType.RYOKAN,
        icon=RYOKAN_ICON,
        description=ryokan.description or "",
        details=build_details_html(ryokan),
        image=select_image_url(ryokan)
    )


def filter_map_items_by_layer(items: Iterable[MapItem], layer: str) -> List[MapItem]:
    """依圖層篩選，"all" 回傳全部"""
    if layer == MAP_LAYER_ALL:
        return list(items)
    return [item for item in items if item.type.value == layer]
