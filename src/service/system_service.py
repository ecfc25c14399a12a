import logging
from sqlalchemy import inspect, text
from models import db, Section


def check_database():
    logging.info("Checking database connection")
    db_test = db.session.execute(text("SELECT 1 AS test")).mappings().first()
    columns = inspect(db.engine).get_columns("photos")
    table_structure = [
        {
            "name": column["name"],
            "type": str(column["type"]),
            "nullable": column["nullable"],
            "primary_key": bool(column.get("primary_key")),
        }
        for column in columns
    ]
    return {
        "ok": True,
        "message": "Database is working correctly",
        "db_test": dict(db_test),
        "table_structure": table_structure,
        "sections_count": db.session.query(Section).count(),
    }
