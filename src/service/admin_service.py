import logging
from sqlalchemy import func
from models import db, User, Photo, Section, AdminLog
from service.errors import NotFoundError
from service.photo_service import list_photos, delete_photo
from service.storage_service import remove_upload
from service.user_service import user_rows_query, serialize_user_row, get_user_profile

LOG_LIMIT = 100


def log_admin_action(admin_id, action, target_type, target_id, details):
    """Record an admin action. Failures are logged and never interrupt the action itself."""
    try:
        db.session.add(AdminLog(
            admin_id=admin_id,
            action=action,
            target_type=target_type,
            target_id=target_id,
            details=details,
        ))
        db.session.commit()
    except Exception:
        db.session.rollback()
        logging.exception(f"Could not record admin action {action}")


def get_dashboard_stats():
    return {
        "total_users": db.session.query(func.count(User.id)).filter(User.role != "admin").scalar(),
        "total_photos": db.session.query(func.count(Photo.id)).scalar(),
        "total_sections": db.session.query(func.count(Section.id)).scalar(),
        "banned_users": db.session.query(func.count(User.id)).filter(User.is_banned.is_(True)).scalar(),
    }


def list_managed_users():
    rows = (
        user_rows_query()
        .filter(User.role != "admin")
        .order_by(User.created_at.desc(), User.id.desc())
        .all()
    )
    return [serialize_user_row(row, admin_view=True) for row in rows]


def get_managed_user_profile(user_id):
    return get_user_profile(user_id, admin_view=True)


def get_managed_user(user_id):
    user = db.session.query(User).filter(User.id == user_id, User.role != "admin").first()
    if user is None:
        raise NotFoundError("User not found")
    return user


def set_user_ban(admin_id, user_id, is_banned):
    user = get_managed_user(user_id)
    user.is_banned = bool(is_banned)
    db.session.commit()

    if is_banned:
        log_admin_action(admin_id, "ban_user", "user", user_id, f"Banned user {user.username}")
        return f"User {user.username} banned successfully"
    log_admin_action(admin_id, "unban_user", "user", user_id, f"Unbanned user {user.username}")
    return f"User {user.username} unbanned successfully"


def delete_user(admin_id, user_id):
    user = get_managed_user(user_id)
    username = user.username
    filenames = [photo.filename for photo in user.photos]
    if user.profile_picture:
        filenames.append(user.profile_picture)

    db.session.delete(user)
    db.session.commit()
    for filename in filenames:
        remove_upload(filename)

    log_admin_action(admin_id, "delete_user", "user", user_id, f"Deleted user {username}")
    logging.info(f"Admin {admin_id} deleted user {user_id} and {len(filenames)} file(s)")


def list_all_photos():
    return list_photos()


def delete_any_photo(admin_id, photo_id):
    photo = db.session.get(Photo, photo_id)
    if photo is None:
        raise NotFoundError("Photo not found")
    owner = photo.user.username if photo.user else "unknown"
    delete_photo(photo)
    log_admin_action(admin_id, "delete_photo", "photo", photo_id, f"Deleted photo of {owner}")


def list_admin_logs(limit=LOG_LIMIT):
    logs = (
        db.session.query(AdminLog)
        .order_by(AdminLog.created_at.desc(), AdminLog.id.desc())
        .limit(limit)
        .all()
    )
    return [entry.to_dict() for entry in logs]


def clear_admin_logs(admin_id):
    deleted = db.session.query(AdminLog).delete(synchronize_session=False)
    db.session.commit()
    log_admin_action(admin_id, "clear_logs", "system", None, "Cleared all admin logs")
    logging.info(f"Admin {admin_id} cleared {deleted} log entries")
