import hmac
import logging
from flask import current_app
from sqlalchemy import func
from models import db, Section, Photo
from service.errors import ValidationError, ConflictError, AuthenticationError, NotFoundError


def check_section_password(password):
    if not password:
        raise ValidationError("Password is required")
    if not isinstance(password, str):
        raise ValidationError("Password must be text")
    expected = current_app.config["SECTION_PASSWORD"]
    if not hmac.compare_digest(password.encode("utf-8"), expected.encode("utf-8")):
        logging.warning("Rejected section change: wrong password")
        raise AuthenticationError("Incorrect password")


def check_section_fields(name, description):
    if not isinstance(name, str):
        raise ValidationError("Section name must be text")
    if description is not None and not isinstance(description, str):
        raise ValidationError("Section description must be text")


def get_section(section_id):
    section = db.session.get(Section, section_id)
    if section is None:
        raise NotFoundError("Section not found")
    return section


def list_sections():
    sections = db.session.query(Section).order_by(Section.name.asc()).all()
    return [section.to_dict() for section in sections]


def create_section(name, description, password):
    if not name or not password:
        raise ValidationError("Name and password are required")
    check_section_fields(name, description)
    check_section_password(password)
    if db.session.query(Section).filter_by(name=name).first():
        raise ConflictError("A section with that name already exists")

    section = Section(name=name, description=description)
    db.session.add(section)
    db.session.commit()
    logging.info(f"Created section {name} (id={section.id})")
    return section


def update_section(section_id, name, description, password):
    if not name or not password:
        raise ValidationError("Name and password are required")
    check_section_fields(name, description)
    check_section_password(password)
    section = get_section(section_id)
    duplicate = (
        db.session.query(Section)
        .filter(Section.name == name, Section.id != section_id)
        .first()
    )
    if duplicate:
        raise ConflictError("A section with that name already exists")

    section.name = name
    section.description = description
    db.session.commit()
    logging.info(f"Updated section {section_id}")
    return section


def delete_section(section_id, password):
    check_section_password(password)
    section = get_section(section_id)
    photo_count = db.session.query(func.count(Photo.id)).filter(Photo.section_id == section_id).scalar()
    if photo_count:
        raise ValidationError("A section that contains photos cannot be deleted")

    db.session.delete(section)
    db.session.commit()
    logging.info(f"Deleted section {section_id}")
