# apps/api/routes/news.py
from flask import Blueprint, current_app, jsonify, request

from services.collector import newsapi

bp = Blueprint("news", __name__)

@bp.get("/news")
def news():
    category = (request.args.get("category") or "").strip() or None
    articles = newsapi.fetch_news_articles(category)
    current_app.logger.info(f"[news] category={category or 'General'} → {len(articles)} articles")
    return jsonify(articles=articles)
