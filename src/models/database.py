from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine
import logging
from datetime import datetime, timezone

logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

db = SQLAlchemy()


def utc_now():
    return datetime.now(timezone.utc)


def isoformat_utc(value):
    """ISO string with an explicit UTC offset; SQLite hands back naive values."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless the pragma is on for every connection
    if dbapi_connection.__class__.__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(app):
    from config.config import DEFAULT_SECTIONS
    from models.section import Section

    db.init_app(app)
    with app.app_context():
        db.create_all()
        if db.session.query(Section).count() == 0:
            logging.info("Inserting default sections")
            for name, description in DEFAULT_SECTIONS:
                db.session.add(Section(name=name, description=description))
            db.session.commit()
