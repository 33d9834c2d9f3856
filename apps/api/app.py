from flask import Flask, jsonify
from shared.settings import settings
from shared.db import db
from flask_migrate import Migrate
from pathlib import Path
from dotenv import load_dotenv

from services.classifier import InvalidInput
from services.collector.newsapi import NewsApiError
from services.history.tracker import InvalidHistoryEntry
from services.auth.accounts import AuthError

ROOT = Path(__file__).resolve().parents[2]
load_dotenv(ROOT / ".env")

migrate = Migrate()

def create_app(test_config: dict | None = None):
    app = Flask(__name__)
    app.config.from_mapping(
        SECRET_KEY=settings.SECRET_KEY,
        SQLALCHEMY_DATABASE_URI=settings.SQLALCHEMY_DATABASE_URI,
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
    )
    if test_config:
        app.config.update(test_config)

    db.init_app(app)
    migrate.init_app(app, db)

    # 블루프린트 등록
    from apps.api.routes.health import bp as health_bp
    from apps.api.routes.classify import bp as classify_bp
    from apps.api.routes.news import bp as news_bp
    from apps.api.routes.history import bp as history_bp
    from apps.api.routes.auth import bp as auth_bp
    for bp in (health_bp, classify_bp, news_bp, history_bp, auth_bp):
        app.register_blueprint(bp)

    @app.errorhandler(InvalidInput)
    @app.errorhandler(InvalidHistoryEntry)
    def bad_request(e):
        return jsonify(error=str(e)), 400

    @app.errorhandler(AuthError)
    def auth_failed(e):
        return jsonify(error=str(e)), e.status

    @app.errorhandler(NewsApiError)
    def upstream_failed(e):
        app.logger.warning(f"[news] ⚠️ upstream error: {e.message}")
        return jsonify(error=e.message), 502

    @app.get("/")
    def index():
        return "News Classifier API"

    return app
