import argparse
from app import create_app
from models import db, User


def describe_users():
    lines = []
    for user in db.session.query(User).order_by(User.id).all():
        hash_length = len(user.password_hash) if user.password_hash else 0
        lines.append(
            f"{user.id}\t{user.username}\t{user.email or '-'}\t{user.role}\t"
            f"{'banned' if user.is_banned else 'active'}\thash:{hash_length}"
        )
    return lines


def main(argv=None):
    parser = argparse.ArgumentParser(description="List gallery users")
    parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        lines = describe_users()
    if not lines:
        print("No users in the database")
        print("Create one with: python -m tools.create_user <username> <password>")
        return 0
    print("id\tusername\temail\trole\tstate\tpassword")
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
