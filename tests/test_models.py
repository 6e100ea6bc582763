"""
資料模型測試
"""

from onsen_navigator.models import (
    ImageRef,
    Ryokan,
    RyokanListResponse,
    RyokanFilters,
    PriceRange,
    LAYER_BUTTONS,
    MAP_LAYER_ALL
)


class TestRyokan:
    """旅館紀錄"""

    def test_from_dict(self, ryokan_payload):
        ryokan = Ryokan.from_dict(ryokan_payload)

        assert ryokan.name == "金具屋"
        assert ryokan.created_at == "2024-01-10T02:00:00.000Z"
        assert ryokan.hero_image == ImageRef(url="https://images.microcms-assets.io/hero.jpg", width=1200, height=800)
        assert len(ryokan.gallery) == 2
        assert ryokan.number_of_rooms == 29
        assert ryokan.open_air_bath is True
        assert ryokan.coordinates == [36.7338, 138.4447]

    def test_missing_fields_stay_absent(self):
        ryokan = Ryokan.from_dict({"id": "x", "latitude": 35.0, "longitude": 139.0})

        assert ryokan.phone is None
        assert ryokan.cover is None
        assert ryokan.gallery is None
        assert ryokan.onsen_area is None
        assert ryokan.number_of_rooms is None
        assert ryokan.day_use is None

    def test_explicit_false_kept(self):
        ryokan = Ryokan.from_dict({"latitude": 35.0, "longitude": 139.0, "dayUse": False})
        assert ryokan.day_use is False

    def test_to_dict_uses_api_keys_and_omits_absent(self, ryokan_payload):
        data = Ryokan.from_dict(ryokan_payload).to_dict()

        assert data["onsenArea"] == {"name": "渋温泉"}
        assert data["openAirBath"] is True
        assert data["numberOfRooms"] == 29
        assert "dogFriendly" not in data
        assert "web" not in data
        assert data == ryokan_payload

    def test_projection_without_timestamps(self):
        ryokan = Ryokan.from_dict({"id": "a", "name": "一乃湯", "latitude": 36.0, "longitude": 138.0})
        assert ryokan.to_dict() == {"id": "a", "name": "一乃湯", "latitude": 36.0, "longitude": 138.0}


class TestRyokanListResponse:
    """分頁回應"""

    def test_from_dict(self, list_payload):
        response = RyokanListResponse.from_dict(list_payload)

        assert response.total_count == 2
        assert response.limit == 10
        assert [r.id for r in response.contents] == ["kanaya-01", "ichinoyu-02"]

    def test_to_dict(self, list_payload):
        assert RyokanListResponse.from_dict(list_payload).to_dict() == list_payload


class TestRyokanFilters:
    """篩選條件"""

    def test_default(self):
        assert RyokanFilters().to_dict() == {
            "priceRange": None,
            "facilities": [],
            "dining": [],
            "hasLanguageService": False,
            "tattooFriendly": False,
            "dailyUse": False
        }

    def test_from_dict(self):
        filters = RyokanFilters.from_dict({
            "priceRange": {"min": 10000, "max": 30000},
            "facilities": ["露天風呂"],
            "dining": ["部屋食"],
            "hasLanguageService": True,
            "tattooFriendly": True,
            "dailyUse": False
        })

        assert filters.price_range == PriceRange(min=10000, max=30000)
        assert filters.facilities == ["露天風呂"]
        assert filters.has_language_service is True
        assert filters.to_dict()["priceRange"] == {"min": 10000, "max": 30000}


class TestUiConstants:
    """前端常數"""

    def test_layer_buttons_include_all(self):
        ids = [button["id"] for button in LAYER_BUTTONS]
        assert ids == ["onsen", "ryokan", "spot", MAP_LAYER_ALL]


class TestNullContents:
    """contents 為 null"""

    def test_null_contents_is_empty(self):
        response = RyokanListResponse.from_dict({"contents": None, "totalCount": 0, "offset": 0, "limit": 1})
        assert response.contents == []
