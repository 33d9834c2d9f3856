import os
from dotenv import load_dotenv

load_dotenv()

_DEFAULT_PROXIES = ",".join([
    "",  # 직접 호출
    "https://api.allorigins.win/raw?url=",
    "https://api.codetabs.com/v1/proxy?quest=",
    "https://corsproxy.io/?",
])

class Settings:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///news.sqlite3")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    NEWS_API_KEY = os.getenv("NEWS_API_KEY", "")
    NEWS_API_BASE_URL = os.getenv("NEWS_API_BASE_URL", "https://newsapi.org/v2")
    NEWS_COUNTRY = os.getenv("NEWS_COUNTRY", "us")
    NEWS_PAGE_SIZE = int(os.getenv("NEWS_PAGE_SIZE", "100"))
    NEWS_TIMEOUT = float(os.getenv("NEWS_TIMEOUT", "15"))
    NEWS_RETRIES = int(os.getenv("NEWS_RETRIES", "2"))
    # 빈 항목 = 프록시 없이 직접 호출
    NEWS_PROXIES = [u.strip() for u in os.getenv("NEWS_PROXIES", _DEFAULT_PROXIES).split(",")]
    DEFAULT_IMAGE_URL = os.getenv(
        "DEFAULT_IMAGE_URL",
        "https://images.unsplash.com/photo-1504711434969-e33886168f5c?auto=format&fit=crop&w=800",
    )

    HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "10"))
    RECOMMENDATION_COUNT = int(os.getenv("RECOMMENDATION_COUNT", "3"))
    DEFAULT_CATEGORIES = [c.strip() for c in os.getenv("DEFAULT_CATEGORIES", "Technology,Business,Science").split(",") if c.strip()]

settings = Settings()
