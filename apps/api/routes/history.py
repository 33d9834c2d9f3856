# apps/api/routes/history.py
from flask import Blueprint, current_app, jsonify, request

from apps.api.routes.auth import current_user_id
from services.history.tracker import InvalidHistoryEntry, category_stats, recent_history, record_read
from services.recommend.ranker import build_recommendations, recommendation_categories

bp = Blueprint("history", __name__)


@bp.post("/history")
def add_history():
    uid = current_user_id()
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise InvalidHistoryEntry("JSON object body is required")
    row = record_read(uid, payload)
    return jsonify(row.to_dict()), 201


@bp.get("/history")
def get_history():
    rows = recent_history(current_user_id())
    return jsonify(
        history=[r.to_dict() for r in rows],
        category_stats=category_stats(rows),
    )


@bp.get("/recommendations")
def recommendations():
    uid = current_user_id()
    rows = recent_history(uid)
    cats = recommendation_categories(category_stats(rows))
    recs = build_recommendations(cats, [r.title for r in rows])
    current_app.logger.info(f"[recommend] user={uid} categories={cats} → {len(recs)}")
    return jsonify(categories=cats, articles=recs)
