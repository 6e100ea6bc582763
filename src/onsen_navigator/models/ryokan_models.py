"""
旅館資料模型
對應 microCMS `ryokan` API 的紀錄、分頁回應與篩選條件
"""

from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

from .base_models import ImageRef, OnsenArea


# 設施旗標: (屬性名稱, API 欄位名稱)
AMENITY_FIELDS = [
    ("private_bath", "privateBath"),
    ("open_air_bath", "openAirBath"),
    ("onsen_room", "onsenRoom"),
    ("day_use", "dayUse"),
    ("morning_only_plan", "morningOnlyPlan"),
    ("sleep_only_plan", "sleepOnlyPlan"),
    ("bed", "bed"),
    ("tattoo_friendly", "tattooFriendly"),
    ("dog_friendly", "dogFriendly"),
    ("elevator", "elevator"),
    ("barrier_free_washroom", "barrierFreeWashroom"),
    ("barrier_free", "barrierFree"),
    ("karaoke", "karaoke"),
    ("ping_pong", "pingPong"),
]

# 一般欄位: (屬性名稱, API 欄位名稱)
SCALAR_FIELDS = [
    ("id", "id"),
    ("created_at", "createdAt"),
    ("updated_at", "updatedAt"),
    ("published_at", "publishedAt"),
    ("revised_at", "revisedAt"),
    ("name", "name"),
    ("slug", "slug"),
    ("description", "description"),
    ("phone", "phone"),
    ("web", "web"),
    ("address", "address"),
    ("price", "price"),
    ("room_type", "roomType"),
    ("number_of_rooms", "numberOfRooms"),
    ("latitude", "latitude"),
    ("longitude", "longitude"),
]


@dataclass(frozen=True)
class Ryokan:
    """
    旅館紀錄

    所有業務欄位皆為選填；API 未回傳的欄位保持 None，不填入預設值。
    使用 `fields` 投影時，未選取的欄位同樣為 None。
    """
    # 地理位置（必填）
    latitude: float
    longitude: float

    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    published_at: Optional[str] = None
    revised_at: Optional[str] = None

    name: Optional[str] = None
    slug: Optional[str] = None
    onsen_area: Optional[OnsenArea] = None
    description: Optional[str] = None

    hero_image: Optional[ImageRef] = None
    cover: Optional[ImageRef] = None
    gallery: Optional[List[ImageRef]] = None

    phone: Optional[str] = None
    web: Optional[str] = None
    address: Optional[str] = None
    price: Optional[str] = None
    room_type: Optional[str] = None
    number_of_rooms: Optional[int] = None

    # 設施
    private_bath: Optional[bool] = None
    open_air_bath: Optional[bool] = None
    onsen_room: Optional[bool] = None
    day_use: Optional[bool] = None
    morning_only_plan: Optional[bool] = None
    sleep_only_plan: Optional[bool] = None
    bed: Optional[bool] = None
    tattoo_friendly: Optional[bool] = None
    dog_friendly: Optional[bool] = None
    elevator: Optional[bool] = None
    barrier_free_washroom: Optional[bool] = None
    barrier_free: Optional[bool] = None
    karaoke: Optional[bool] = None
    ping_pong: Optional[bool] = None

    @property
    def coordinates(self) -> List[float]:
        """[緯度, 經度]"""
        return [self.latitude, self.longitude]

    def to_dict(self) -> Dict[str, Any]:
        """轉換為 API 格式的字典（省略缺少的欄位）"""
        result: Dict[str, Any] = {}

        for attr, key in SCALAR_FIELDS + AMENITY_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                result[key] = value

        if self.onsen_area is not None:
            result["onsenArea"] = self.onsen_area.to_dict()
        if self.hero_image is not None:
            result["heroImage"] = self.hero_image.to_dict()
        if self.cover is not None:
            result["cover"] = self.cover.to_dict()
        if self.gallery is not None:
            result["gallery"] = [image.to_dict() for image in self.gallery]

        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Ryokan':
        """從 API 回應建立，不做任何結構驗證"""
        values: Dict[str, Any] = {}
        for attr, key in SCALAR_FIELDS + AMENITY_FIELDS:
            values[attr] = data.get(key)

        gallery = data.get("gallery")

        return cls(
            onsen_area=OnsenArea.from_dict(data.get("onsenArea")),
            hero_image=ImageRef.from_dict(data.get("heroImage")),
            cover=ImageRef.from_dict(data.get("cover")),
            gallery=[ImageRef.from_dict(image) for image in gallery] if gallery is not None else None,
            **values
        )


@dataclass
class RyokanListResponse:
    """列表 API 的分頁回應"""
    contents: List[Ryokan]
    total_count: int
    offset: int
    limit: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contents": [ryokan.to_dict() for ryokan in self.contents],
            "totalCount": self.total_count,
            "offset": self.offset,
            "limit": self.limit
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RyokanListResponse':
        return cls(
            contents=[Ryokan.from_dict(item) for item in data.get("contents") or []],
            total_count=data.get("totalCount"),
            offset=data.get("offset"),
            limit=data.get("limit")
        )


@dataclass(frozen=True)
class PriceRange:
    """價格區間"""
    min: int
    max: int

    def to_dict(self) -> Dict[str, Any]:
        return {"min": self.min, "max": self.max}


@dataclass
class RyokanFilters:
    """篩選列的條件"""
    price_range: Optional[PriceRange] = None
    facilities: List[str] = field(default_factory=list)
    dining: List[str] = field(default_factory=list)
    has_language_service: bool = False
    tattoo_friendly: bool = False
    daily_use: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priceRange": self.price_range.to_dict() if self.price_range else None,
            "facilities": list(self.facilities),
            "dining": list(self.dining),
            "hasLanguageService": self.has_language_service,
            "tattooFriendly": self.tattoo_friendly,
            "dailyUse": self.daily_use
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RyokanFilters':
        price_range = data.get("priceRange")
        return cls(
            price_range=PriceRange(min=price_range["min"], max=price_range["max"]) if price_range else None,
            facilities=list(data.get("facilities", [])),
            dining=list(data.get("dining", [])),
            has_language_service=data.get("hasLanguageService", False),
            tattoo_friendly=data.get("tattooFriendly", False),
            daily_use=data.get("dailyUse", False)
        )
