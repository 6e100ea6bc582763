"""
溫泉旅館導覽 FastAPI 應用程式
提供地圖與旅館詳細頁所需的資料
"""

import logging
from typing import Dict, Any, Iterator, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Depends, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from .api.page_data import load_main_page, load_ryokan_page, load_ryokan_by_slug_page
from .models.map_models import MAP_LAYER_ALL, SECTIONS, LANGUAGES, LAYER_BUTTONS
from .models.ryokan_models import RyokanFilters
from .services.microcms import MicroCMSClient, MicroCMSConfig, create_microcms_client
from .utils.data_converter import filter_map_items_by_layer


# 設定日誌
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


VALID_LAYERS = {button["id"] for button in LAYER_BUTTONS}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """應用程式生命週期管理"""
    logger.info("Starting Onsen Navigator API...")

    config = MicroCMSConfig.from_env()
    if not config.api_key:
        logger.warning("MICROCMS_API_KEY not set, only public endpoints are readable")
    logger.info(f"microCMS config: {config.to_dict()}")

    yield

    logger.info("Shutting down Onsen Navigator API...")


# 創建 FastAPI 應用
app = FastAPI(
    title="溫泉旅館導覽 API",
    description="提供溫泉地旅館的地圖與詳細資訊",
    version="1.0.0",
    lifespan=lifespan
)

# 設定 CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


# 依賴注入
def get_microcms_config() -> MicroCMSConfig:
    """讀取 microCMS 配置"""
    return MicroCMSConfig.from_env()


def get_microcms_client(config: MicroCMSConfig = Depends(get_microcms_config)) -> Iterator[MicroCMSClient]:
    """每個請求建立帶金鑰的伺服器端客戶端，回應後關閉連線"""
    client = create_microcms_client(config=config)
    try:
        yield client
    finally:
        client.close()


# API 端點
@app.get("/")
async def root():
    """根端點"""
    return {
        "message": "溫泉旅館導覽 API",
        "version": "1.0.0",
        "status": "運行中"
    }


@app.get("/health")
async def health_check(config: MicroCMSConfig = Depends(get_microcms_config)):
    """健康檢查"""
    return {
        "status": "healthy",
        "microcms": config.to_dict()
    }


@app.get("/api/ui-config")
async def get_ui_config():
    """前端導覽與篩選的預設值"""
    return {
        "success": True,
        "data": {
            "sections": SECTIONS,
            "languages": LANGUAGES,
            "layer_buttons": LAYER_BUTTONS,
            "default_filters": RyokanFilters().to_dict()
        }
    }


@app.get("/api/ryokans")
def get_main_page(
    draft_key: Optional[str] = Query(None, alias="draftKey", description="下書きプレビュー用キー"),
    layer: str = Query(MAP_LAYER_ALL, description="地圖圖層"),
    client: MicroCMSClient = Depends(get_microcms_client)
) -> Dict[str, Any]:
    """首頁資料：旅館列表與地圖項目"""
    if layer not in VALID_LAYERS:
        raise HTTPException(status_code=400, detail=f"未知的圖層: {layer}")

    try:
        page = load_main_page(client, draft_key=draft_key)
        map_items = filter_map_items_by_layer(page["map_items"], layer)

        return {
            "success": True,
            "data": {
                "ryokans": [ryokan.to_dict() for ryokan in page["ryokans"]],
                "map_items": [item.to_dict() for item in map_items],
                "total_found": len(page["ryokans"])
            }
        }
    except Exception as e:
        logger.error(f"Error in main page endpoint: {e}")
        raise HTTPException(status_code=500, detail="獲取旅館列表時發生錯誤")


@app.get("/api/ryokans/slug/{slug}")
def get_ryokan_by_slug(
    slug: str,
    draft_key: Optional[str] = Query(None, alias="draftKey"),
    client: MicroCMSClient = Depends(get_microcms_client)
) -> Dict[str, Any]:
    """以 slug 獲取旅館詳細資訊"""
    try:
        page = load_ryokan_by_slug_page(client, slug, draft_key=draft_key)
        ryokan = page["ryokan"]

        return {
            "success": True,
            "data": {
                "ryokan": ryokan.to_dict() if ryokan else None
            }
        }
    except Exception as e:
        logger.error(f"Error in ryokan slug endpoint: {e}")
        raise HTTPException(status_code=500, detail="獲取旅館資訊時發生錯誤")


@app.get("/api/ryokans/{content_id}")
def get_ryokan(
    content_id: str,
    draft_key: Optional[str] = Query(None, alias="draftKey"),
    client: MicroCMSClient = Depends(get_microcms_client)
) -> Dict[str, Any]:
    """以 ID 獲取旅館詳細資訊"""
    try:
        page = load_ryokan_page(client, content_id, draft_key=draft_key)
        ryokan = page["ryokan"]

        return {
            "success": True,
            "data": {
                "ryokan": ryokan.to_dict() if ryokan else None
            }
        }
    except Exception as e:
        logger.error(f"Error in ryokan detail endpoint: {e}")
        raise HTTPException(status_code=500, detail="獲取旅館資訊時發生錯誤")


# 錯誤處理
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": "端點不存在" if exc.status_code == 404 else "請求失敗",
            "detail": exc.detail
        }
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "伺服器內部錯誤",
            "detail": "請稍後再試或聯繫系統管理員"
        }
    )


if __name__ == "__main__":
    # 開發模式運行
    uvicorn.run(
        "onsen_navigator.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
