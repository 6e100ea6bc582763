"""
工具函數模組
資料轉換與地圖圖層篩選
"""

from .data_converter import (
    transform_ryokan_for_info_card,
    filter_map_items_by_layer,
    select_key_facilities,
    select_image_url
)

__all__ = [
    'transform_ryokan_for_info_card',
    'filter_map_items_by_layer',
    'select_key_facilities',
    'select_image_url'
]
