import time
import logging
from typing import Optional
from urllib.parse import quote, urlencode

import requests

from shared.settings import settings
from services.preprocess.clean import clean_html_to_text

logger = logging.getLogger(__name__)

MSG_RATE_LIMIT = "Rate limit exceeded. Please try again later."
MSG_INVALID_KEY = "Invalid API key. Please check your configuration."
MSG_TIMEOUT = "Request timed out. Please try again."
MSG_UPGRADE = "Please upgrade to a paid plan for this feature."
MSG_NETWORK = "Connection error. Please check your internet connection and try again."
MSG_GENERIC = "Failed to fetch news. Please try again later."


class NewsApiError(Exception):
    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code


# -------------------------
# 유틸 함수
# -------------------------

def _build_endpoint(category: Optional[str] = None) -> str:
    params = {}
    if category:
        params["category"] = category.lower()
    params.update({
        "pageSize": settings.NEWS_PAGE_SIZE,
        "country": settings.NEWS_COUNTRY,
        "apiKey": settings.NEWS_API_KEY,
    })
    return f"{settings.NEWS_API_BASE_URL}/top-headlines?{urlencode(params)}"


def _status_of(exc: Exception) -> Optional[int]:
    if isinstance(exc, NewsApiError):
        return exc.status
    resp = getattr(exc, "response", None)
    return resp.status_code if resp is not None else None


def _response_message(exc: Exception) -> Optional[str]:
    resp = getattr(exc, "response", None)
    if resp is None:
        return None
    try:
        body = resp.json()
    except ValueError:
        return None
    return body.get("message") if isinstance(body, dict) else None


def _error_message(exc: Exception) -> str:
    status = _status_of(exc)
    if isinstance(exc, NewsApiError) and status not in (401, 426, 429):
        return exc.message
    if status == 429:
        return MSG_RATE_LIMIT
    if status == 401:
        return MSG_INVALID_KEY
    if isinstance(exc, requests.Timeout):
        return MSG_TIMEOUT
    if status == 426:
        return MSG_UPGRADE
    if isinstance(exc, requests.ConnectionError):
        return MSG_NETWORK
    api_message = _response_message(exc)
    if api_message:
        return f"News API Error: {api_message}"
    return MSG_GENERIC


# -------------------------
# 호출 본체
# -------------------------

def _fetch_with_proxy(url: str, proxy: str) -> dict:
    final_url = f"{proxy}{quote(url, safe='')}" if proxy else url
    r = requests.get(final_url, headers={"Accept": "application/json"}, timeout=settings.NEWS_TIMEOUT)
    r.raise_for_status()

    try:
        data = r.json()
    except ValueError:
        raise NewsApiError("Invalid response format", status=r.status_code)
    if not isinstance(data, dict):
        raise NewsApiError("Invalid response format", status=r.status_code)
    if data.get("status") == "error":
        raise NewsApiError(data.get("message") or "News API returned an error",
                           status=r.status_code, code=data.get("code"))
    if not isinstance(data.get("articles"), list):
        raise NewsApiError("Invalid articles data received", status=r.status_code)
    return data


def _fetch_with_retry_and_fallback(url: str, retries: Optional[int] = None) -> dict:
    tries = settings.NEWS_RETRIES if retries is None else retries
    last_error: Optional[Exception] = None

    # 프록시 순서대로, 프록시마다 tries 회 시도
    for proxy in settings.NEWS_PROXIES:
        for i in range(tries):
            try:
                return _fetch_with_proxy(url, proxy)
            except (requests.RequestException, NewsApiError) as e:
                last_error = e
                status = _status_of(e)
                if status == 429:
                    time.sleep(2 * (i + 1))
                    continue
                if status == 401:
                    raise NewsApiError(MSG_INVALID_KEY, status=401) from e
                if status == 426:
                    raise NewsApiError(MSG_UPGRADE, status=426) from e
                logger.warning("News fetch via '%s' failed (attempt %d): %s", proxy or "direct", i + 1, e)
                time.sleep(1 * (i + 1))

    if last_error is None:
        raise NewsApiError("No news endpoints configured")
    raise last_error


def _to_article(item: dict, category: Optional[str]) -> dict:
    source = item.get("source") or {}
    return {
        "title": item["title"].strip(),
        "description": clean_html_to_text(item["description"]) or item["description"].strip(),
        "url": item.get("url"),
        "url_to_image": item.get("urlToImage") or settings.DEFAULT_IMAGE_URL,
        "category": category or "General",
        "source": source.get("name") or "Unknown Source",
        "published_at": item.get("publishedAt"),
    }


def fetch_news_articles(category: Optional[str] = None) -> list[dict]:
    try:
        data = _fetch_with_retry_and_fallback(_build_endpoint(category))
    except (requests.RequestException, NewsApiError) as e:
        message = _error_message(e)
        logger.error("News API Error: %s (status=%s)", message, _status_of(e))
        raise NewsApiError(message, status=_status_of(e), code=getattr(e, "code", None)) from e

    return [
        _to_article(a, category)
        for a in data["articles"]
        if isinstance(a, dict) and a.get("title") and a.get("description")
    ]
