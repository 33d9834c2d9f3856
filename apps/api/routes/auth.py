# apps/api/routes/auth.py
from flask import Blueprint, current_app, jsonify, request, session

from shared.db import db
from apps.api.models import User
from services.auth.accounts import AuthError, NotAuthenticated, authenticate, sign_up

bp = Blueprint("auth", __name__, url_prefix="/auth")


def current_user_id() -> str:
    """세션(서명 쿠키)에 저장된 로그인 사용자 id"""
    uid = session.get("user_id")
    if uid is None or db.session.get(User, uid) is None:
        session.clear()
        raise NotAuthenticated("login required")
    return str(uid)


def _credentials_payload() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise AuthError("JSON object body is required")
    return payload


def _login(user: User):
    session.clear()
    session["user_id"] = user.id


@bp.post("/signup")
def signup():
    payload = _credentials_payload()
    user = sign_up(payload.get("email"), payload.get("password"))
    _login(user)
    return jsonify(user.to_dict()), 201


@bp.post("/login")
def login():
    payload = _credentials_payload()
    user = authenticate(payload.get("email"), payload.get("password"))
    _login(user)
    current_app.logger.info(f"[auth] user {user.id} logged in")
    return jsonify(user.to_dict())


@bp.post("/logout")
def logout():
    session.clear()
    return jsonify(ok=True)


@bp.get("/me")
def me():
    user = db.session.get(User, int(current_user_id()))
    return jsonify(user.to_dict())
