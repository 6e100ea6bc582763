"""
API 模組 - 提供頁面資料載入
"""

from .page_data import (
    load_main_page,
    load_ryokan_page,
    load_ryokan_by_slug_page,
    MAIN_PAGE_FIELDS
)

__all__ = [
    'load_main_page',
    'load_ryokan_page',
    'load_ryokan_by_slug_page',
    'MAIN_PAGE_FIELDS'
]
