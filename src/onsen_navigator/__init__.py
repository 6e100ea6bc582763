"""
溫泉旅館導覽
microCMS 內容客戶端、地圖資訊卡轉換與頁面資料 API
"""

__version__ = "1.0.0"
