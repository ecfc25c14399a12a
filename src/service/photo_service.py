import logging
from flask import current_app
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from models import db, Photo, Section, User, Vote, Comment, PhotoTag
from service.errors import ValidationError, ConflictError, NotFoundError
from service.storage_service import save_upload, remove_upload

TOP_PHOTOS_LIMIT = 10


def vote_count_column():
    return (
        select(func.count(Vote.id))
        .where(Vote.photo_id == Photo.id)
        .correlate(Photo)
        .scalar_subquery()
        .label("votes")
    )


def comment_count_column():
    return (
        select(func.count(Comment.id))
        .where(Comment.photo_id == Photo.id)
        .correlate(Photo)
        .scalar_subquery()
        .label("comments")
    )


def photo_rows_query():
    """Photos joined with their owner and section, plus vote and comment counts."""
    return (
        db.session.query(
            Photo,
            User.username,
            Section.name.label("section_name"),
            vote_count_column(),
            comment_count_column(),
        )
        .join(User, User.id == Photo.user_id)
        .join(Section, Section.id == Photo.section_id)
    )


def serialize_photo_row(row):
    photo, username, section_name, votes, comments = row
    data = photo.to_dict()
    data.update({
        "username": username,
        "section_name": section_name,
        "votes": votes or 0,
        "comments": comments or 0,
    })
    return data


def list_photos(section_id=None):
    query = photo_rows_query()
    if section_id is not None:
        query = query.filter(Photo.section_id == section_id)
    rows = query.order_by(Photo.created_at.desc(), Photo.id.desc()).all()
    return [serialize_photo_row(row) for row in rows]


def top_photos(limit=TOP_PHOTOS_LIMIT):
    votes = vote_count_column()
    rows = (
        db.session.query(
            Photo,
            User.username,
            Section.name.label("section_name"),
            votes,
            comment_count_column(),
        )
        .join(User, User.id == Photo.user_id)
        .join(Section, Section.id == Photo.section_id)
        .order_by(votes.desc(), Photo.created_at.desc(), Photo.id.desc())
        .limit(limit)
        .all()
    )
    fields = ("id", "filename", "title", "created_at", "username", "section_name", "votes", "comments")
    return [{key: value for key, value in serialize_photo_row(row).items() if key in fields} for row in rows]


def list_user_photos(user_id):
    rows = (
        photo_rows_query()
        .filter(Photo.user_id == user_id)
        .order_by(Photo.created_at.desc(), Photo.id.desc())
        .all()
    )
    return [serialize_photo_row(row) for row in rows]


def list_tagged_photos(user_id):
    rows = (
        photo_rows_query()
        .join(PhotoTag, PhotoTag.photo_id == Photo.id)
        .filter(PhotoTag.user_id == user_id)
        .order_by(PhotoTag.created_at.desc(), PhotoTag.id.desc())
        .all()
    )
    return [serialize_photo_row(row) for row in rows]


def get_photo(photo_id):
    photo = db.session.get(Photo, photo_id)
    if photo is None:
        raise NotFoundError("Photo not found")
    return photo


def upload_photos(user_id, files, section_id):
    files = [f for f in files if f and f.filename]
    if not files:
        raise ValidationError("Photos are required")
    if not section_id:
        raise ValidationError("Section is required")
    max_files = current_app.config["MAX_UPLOAD_FILES"]
    if len(files) > max_files:
        raise ValidationError(f"At most {max_files} photos can be uploaded at once")
    try:
        section_id = int(section_id)
    except (TypeError, ValueError):
        raise ValidationError("Invalid section")
    if db.session.get(Section, section_id) is None:
        raise NotFoundError("Section not found")

    stored = []
    try:
        for file_storage in files:
            filename = save_upload(file_storage)
            stored.append(filename)
            db.session.add(Photo(user_id=user_id, section_id=section_id, filename=filename, title=None))
        db.session.commit()
    except Exception:
        db.session.rollback()
        for filename in stored:
            remove_upload(filename)
        raise

    count = len(stored)
    logging.info(f"User {user_id} uploaded {count} photo(s) to section {section_id}")
    return count


def find_user_photo_row(model, user_id, photo_id):
    return db.session.query(model).filter_by(user_id=user_id, photo_id=photo_id).first()


def vote_photo(user_id, photo_id):
    get_photo(photo_id)
    existing = find_user_photo_row(Vote, user_id, photo_id)
    if existing:
        raise ConflictError("You already voted for this photo")
    db.session.add(Vote(user_id=user_id, photo_id=photo_id))
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("You already voted for this photo")


def add_comment(user_id, photo_id, text):
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Comment is required")
    get_photo(photo_id)
    comment = Comment(user_id=user_id, photo_id=photo_id, text=text.strip())
    db.session.add(comment)
    db.session.commit()
    return comment


def list_comments(photo_id):
    comments = (
        db.session.query(Comment)
        .filter(Comment.photo_id == photo_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )
    return [comment.to_dict() for comment in comments]


def delete_photo(photo):
    """Delete a photo with its votes, comments and tags, then its stored file."""
    filename = photo.filename
    db.session.delete(photo)
    db.session.commit()
    remove_upload(filename)


def delete_own_photo(user_id, photo_id):
    photo = db.session.query(Photo).filter_by(id=photo_id, user_id=user_id).first()
    if photo is None:
        raise NotFoundError("Photo not found or you do not have permission to delete it")
    delete_photo(photo)
    logging.info(f"User {user_id} deleted photo {photo_id}")


def toggle_tag(user_id, photo_id):
    get_photo(photo_id)
    existing = find_user_photo_row(PhotoTag, user_id, photo_id)
    if existing:
        db.session.delete(existing)
        db.session.commit()
        return False
    db.session.add(PhotoTag(user_id=user_id, photo_id=photo_id))
    try:
        db.session.commit()
    except IntegrityError:
        # a concurrent request tagged the photo first
        db.session.rollback()
    return True


def is_tagged(user_id, photo_id):
    return find_user_photo_row(PhotoTag, user_id, photo_id) is not None
