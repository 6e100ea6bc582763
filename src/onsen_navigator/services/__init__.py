"""
服務模組 - 提供 microCMS 內容 API 存取
"""

from .microcms import (
    MicroCMSClient,
    MicroCMSConfig,
    MicroCMSError,
    MICROCMS_SERVICE_DOMAIN,
    create_microcms_client
)

__all__ = [
    'MicroCMSClient',
    'MicroCMSConfig',
    'MicroCMSError',
    'MICROCMS_SERVICE_DOMAIN',
    'create_microcms_client'
]
