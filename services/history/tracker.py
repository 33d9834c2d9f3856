import logging
from collections import Counter
from typing import Iterable

from shared.db import db
from shared.settings import settings
from apps.api.models import UserHistory

logger = logging.getLogger(__name__)


class InvalidHistoryEntry(ValueError):
    pass


def _opt_str(value) -> str | None:
    return value if isinstance(value, str) and value else None


def record_read(user_id: str, article: dict) -> UserHistory:
    """읽은 기사 기록. 제목을 article_id로 사용"""
    if not user_id:
        raise InvalidHistoryEntry("user_id is required")
    title = article.get("title")
    category = article.get("category")
    if not isinstance(title, str) or not isinstance(category, str):
        raise InvalidHistoryEntry("title and category must be strings")
    title, category = title.strip(), category.strip()
    if not title or not category:
        raise InvalidHistoryEntry("title and category are required")

    row = UserHistory(
        user_id=str(user_id),
        article_id=title,
        category=category,
        title=title,
        image_url=_opt_str(article.get("url_to_image") or article.get("image_url")),
        description=_opt_str(article.get("description")),
    )
    db.session.add(row)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("failed to save history for user %s", user_id)
        raise
    return row


def recent_history(user_id: str, limit: int | None = None) -> list[UserHistory]:
    q = (UserHistory.query
         .filter_by(user_id=str(user_id))
         .order_by(UserHistory.read_at.desc(), UserHistory.id.desc())
         .limit(settings.HISTORY_LIMIT if limit is None else limit))
    return q.all()


def category_stats(rows: Iterable[UserHistory]) -> list[dict]:
    # 처음 등장한 순서 유지
    counts = Counter(r.category for r in rows)
    return [{"name": name, "value": value} for name, value in counts.items()]
