from functools import wraps
from datetime import datetime, timedelta, timezone
import jwt
from flask import current_app, request, g
from models import db, User
from service.errors import AuthenticationError, ForbiddenError

JWT_ALGORITHM = "HS256"


def generate_token(user):
    payload = {"id": user.id, "username": user.username, "role": user.role}
    hours = current_app.config.get("JWT_EXPIRES_HOURS", 0)
    if hours:
        payload["exp"] = datetime.now(timezone.utc) + timedelta(hours=hours)
    return jwt.encode(payload, current_app.config["JWT_SECRET"], algorithm=JWT_ALGORITHM)


def decode_token(token):
    try:
        return jwt.decode(token, current_app.config["JWT_SECRET"], algorithms=[JWT_ALGORITHM])
    except jwt.PyJWTError:
        raise AuthenticationError("Invalid token")


def get_bearer_token():
    header = request.headers.get("Authorization", "")
    parts = header.split(" ", 1)
    if len(parts) != 2 or not parts[1].strip():
        return None
    return parts[1].strip()


def authenticate_request():
    token = get_bearer_token()
    if not token:
        raise AuthenticationError("Token required")
    payload = decode_token(token)

    # a token outlives deletions and bans, so the account is re-checked
    user = db.session.get(User, payload.get("id"))
    if user is None:
        raise AuthenticationError("Invalid token")
    if user.is_banned:
        raise ForbiddenError("Your account has been suspended. Contact the administrator.")
    g.current_user = payload
    return payload


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        authenticate_request()
        return view(*args, **kwargs)
    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        payload = authenticate_request()
        if payload.get("role") != "admin":
            raise ForbiddenError("Access denied. Administrator permissions are required")
        return view(*args, **kwargs)
    return wrapper


def current_user_id():
    return g.current_user["id"]
