import argparse
from sqlalchemy import inspect, func, select, table
from app import create_app
from models import db


def inspect_tables():
    """Map every table to its column names and row count."""
    inspector = inspect(db.engine)
    report = {}
    for name in inspector.get_table_names():
        columns = [column["name"] for column in inspector.get_columns(name)]
        count = db.session.execute(select(func.count()).select_from(table(name))).scalar()
        report[name] = {"columns": columns, "rows": count}
    return report


def main(argv=None):
    parser = argparse.ArgumentParser(description="Show tables, columns and row counts")
    parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        report = inspect_tables()
    print(f"Database: {app.config['SQLALCHEMY_DATABASE_URI']}")
    for name, info in report.items():
        print(f"\n{name} ({info['rows']} rows)")
        for column in info["columns"]:
            print(f"  - {column}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
