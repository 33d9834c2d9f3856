import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from shared.db import db
from apps.api.models import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LEN = 6


class AuthError(Exception):
    status = 400


class InvalidCredentials(AuthError):
    status = 401


class EmailInUse(AuthError):
    status = 409


class NotAuthenticated(AuthError):
    status = 401


def _credentials(email, password) -> tuple[str, str]:
    if not isinstance(email, str) or not isinstance(password, str):
        raise AuthError("email and password are required")
    email = email.strip().lower()
    if "@" not in email:
        raise AuthError("a valid email is required")
    return email, password


def sign_up(email, password) -> User:
    email, password = _credentials(email, password)
    if len(password) < MIN_PASSWORD_LEN:
        raise AuthError(f"password must be at least {MIN_PASSWORD_LEN} characters")
    if User.query.filter_by(email=email).first():
        raise EmailInUse("Email already in use")

    user = User(email=email, password_hash=generate_password_hash(password))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # 동시 가입 경합
        db.session.rollback()
        raise EmailInUse("Email already in use")
    logger.info("user %s signed up", user.id)
    return user


def authenticate(email, password) -> User:
    email, password = _credentials(email, password)
    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password_hash, password):
        raise InvalidCredentials("Invalid email or password")
    return user
