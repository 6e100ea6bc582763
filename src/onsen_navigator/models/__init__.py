"""
溫泉旅館資料模型
microCMS 紀錄、分頁回應與地圖顯示用的資料結構
"""

from .base_models import (
    ImageRef,
    OnsenArea
)

from .ryokan_models import (
    Ryokan,
    RyokanListResponse,
    RyokanFilters,
    PriceRange
)

from .map_models import (
    MapItem,
    MapItemType,
    MAP_LAYER_ALL,
    SECTIONS,
    LANGUAGES,
    LAYER_BUTTONS
)

__all__ = [
    'ImageRef',
    'OnsenArea',
    'Ryokan',
    'RyokanListResponse',
    'RyokanFilters',
    'PriceRange',
    'MapItem',
    'MapItemType',
    'MAP_LAYER_ALL',
    'SECTIONS',
    'LANGUAGES',
    'LAYER_BUTTONS'
]
