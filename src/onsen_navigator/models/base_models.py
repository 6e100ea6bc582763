"""
基礎資料模型
提供旅館紀錄共用的圖片與溫泉地結構
"""

from typing import Dict, Optional, Any
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageRef:
    """圖片資訊"""
    url: str
    width: Optional[int] = None
    height: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "width": self.width,
            "height": self.height
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['ImageRef']:
        """從 API 回應建立，缺少時回傳 None"""
        if not data:
            return None
        return cls(
            url=data.get("url"),
            width=data.get("width"),
            height=data.get("height")
        )


@dataclass(frozen=True)
class OnsenArea:
    """溫泉地"""
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['OnsenArea']:
        if not data:
            return None
        return cls(name=data.get("name"))
