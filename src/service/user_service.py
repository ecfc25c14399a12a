import re
import logging
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from models import db, User, Photo, Vote, Section
from service.errors import ValidationError, ConflictError, ForbiddenError, NotFoundError
from service.photo_service import vote_count_column, comment_count_column
from service.storage_service import save_upload, remove_upload, upload_url
from utils.auth_utils import generate_token

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def total_photos_column():
    return (
        select(func.count(Photo.id))
        .where(Photo.user_id == User.id)
        .correlate(User)
        .scalar_subquery()
        .label("total_photos")
    )


def total_likes_column():
    return (
        select(func.count(Vote.id))
        .join(Photo, Photo.id == Vote.photo_id)
        .where(Photo.user_id == User.id)
        .correlate(User)
        .scalar_subquery()
        .label("total_likes")
    )


def user_rows_query():
    return db.session.query(User, total_photos_column(), total_likes_column())


def serialize_user_row(row, admin_view=False):
    user, total_photos, total_likes = row
    data = user.to_admin_dict() if admin_view else user.to_dict()
    data["total_photos"] = total_photos or 0
    data["total_likes"] = total_likes or 0
    return data


def register_user(username, email, password):
    if not username or not email or not password:
        raise ValidationError("Missing data")
    if not isinstance(email, str) or not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email format")
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError("Username and password must be text")
    if db.session.query(User).filter_by(username=username).first():
        raise ConflictError("Username already exists")
    if db.session.query(User).filter_by(email=email).first():
        raise ConflictError("Email already registered")

    user = User(username=username, email=email, password=password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("Username or email already exists")
    logging.info(f"Registered user {username} (id={user.id})")
    return user


def login_user(username, password):
    if not isinstance(username, str) or not username:
        raise ValidationError("Invalid username or password")
    user = db.session.query(User).filter_by(username=username).first()
    if user is None:
        raise ValidationError("Invalid username or password")
    if user.is_banned:
        raise ForbiddenError("Your account has been suspended. Contact the administrator.")
    if not isinstance(password, str) or not password or not user.check_password(password):
        logging.warning(f"Failed login for {username}")
        raise ValidationError("Invalid username or password")

    token = generate_token(user)
    return {
        "token": token,
        "user": {"id": user.id, "username": user.username, "role": user.role},
    }


def get_user(user_id):
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_user_stats(user_id):
    total_photos = db.session.query(func.count(Photo.id)).filter(Photo.user_id == user_id).scalar()
    total_likes = (
        db.session.query(func.count(Vote.id))
        .join(Photo, Photo.id == Vote.photo_id)
        .filter(Photo.user_id == user_id)
        .scalar()
    )
    return {"total_photos": total_photos or 0, "total_likes": total_likes or 0}


def list_users():
    rows = user_rows_query().order_by(User.username.asc()).all()
    return [serialize_user_row(row) for row in rows]


def profile_photos(user_id):
    rows = (
        db.session.query(
            Photo,
            vote_count_column(),
            comment_count_column(),
            Section.name.label("section_name"),
        )
        .join(Section, Section.id == Photo.section_id)
        .filter(Photo.user_id == user_id)
        .order_by(Photo.created_at.desc(), Photo.id.desc())
        .all()
    )
    photos = []
    for photo, votes, comments, section_name in rows:
        data = photo.to_dict()
        data.update({"votes": votes or 0, "comments": comments or 0, "section_name": section_name})
        photos.append(data)
    return photos


def get_user_profile(user_id, admin_view=False):
    query = user_rows_query().filter(User.id == user_id)
    if admin_view:
        query = query.filter(User.role != "admin")
    row = query.first()
    if row is None:
        raise NotFoundError("User not found")
    return {
        "user": serialize_user_row(row, admin_view=admin_view),
        "photos": profile_photos(user_id),
    }


def set_profile_picture(user_id, file_storage):
    if file_storage is None or not file_storage.filename:
        raise ValidationError("No image was provided")
    user = get_user(user_id)
    previous = user.profile_picture
    filename = save_upload(file_storage)
    user.profile_picture = filename
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        remove_upload(filename)
        raise
    if previous and previous != filename:
        remove_upload(previous)
    return {
        "message": "Profile picture updated successfully",
        "filename": filename,
        "url": upload_url(filename),
    }


def get_profile_picture(user_id):
    user = get_user(user_id)
    return {
        "profile_picture": user.profile_picture,
        "url": upload_url(user.profile_picture),
    }
