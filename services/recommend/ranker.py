# services/recommend/ranker.py
import logging
from typing import Callable, Iterable, Optional

from shared.settings import settings
from services.collector.newsapi import NewsApiError, fetch_news_articles

logger = logging.getLogger(__name__)

Fetcher = Callable[[Optional[str]], list[dict]]


def recommendation_categories(stats: list[dict], topk: int = 3) -> list[str]:
    """히스토리 상위 카테고리, 없으면 기본 카테고리"""
    if not stats:
        return list(settings.DEFAULT_CATEGORIES)
    ranked = sorted(stats, key=lambda s: s["value"], reverse=True)
    return [s["name"] for s in ranked[:topk]]


def _take_unseen(articles: list[dict], picked: list[dict], seen_titles: set[str], n: int) -> list[dict]:
    taken_titles = {a["title"] for a in picked}
    out = []
    for a in articles:
        if len(out) >= n:
            break
        if a["title"] in taken_titles or a["title"] in seen_titles:
            continue
        out.append(a)
        taken_titles.add(a["title"])
    return out


def build_recommendations(categories: list[str],
                          history_titles: Iterable[str],
                          limit: int | None = None,
                          max_attempts: int = 3,
                          fetch: Optional[Fetcher] = None) -> list[dict]:
    limit = settings.RECOMMENDATION_COUNT if limit is None else limit
    fetch = fetch or fetch_news_articles
    seen = set(history_titles)
    picked: list[dict] = []
    attempts = 0

    while len(picked) < limit and attempts < max_attempts:
        try:
            # 카테고리 순서대로 채우기
            for cat in categories:
                if len(picked) >= limit:
                    break
                picked += _take_unseen(fetch(cat), picked, seen, limit - len(picked))

            # 부족하면 전체 헤드라인으로 보충
            if len(picked) < limit:
                picked += _take_unseen(fetch(None), picked, seen, limit - len(picked))
        except NewsApiError as e:
            logger.warning("recommendation fetch failed (attempt %d): %s", attempts + 1, e)
        attempts += 1

    return picked
