"""
Create a user account from the command line, e.g. to bootstrap the first admin.

    python -m tools.create_user admin s3cret --email admin@example.com --admin
"""
import argparse
from app import create_app
from models import db, User


def create_user(username, password, email=None, admin=False):
    """Return ``(user, created)``; an existing username is left untouched."""
    existing = db.session.query(User).filter_by(username=username).first()
    if existing:
        return existing, False

    user = User(username=username, email=email, password=password, role="admin" if admin else "user")
    db.session.add(user)
    db.session.commit()
    return user, True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create a gallery user")
    parser.add_argument('username')
    parser.add_argument('password')
    parser.add_argument('--email', help='email address of the account')
    parser.add_argument('--admin', action='store_true', help='grant the admin role')
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        user, created = create_user(args.username, args.password, args.email, args.admin)
        if created:
            print(f"User \"{user.username}\" created (id={user.id}, role={user.role})")
        else:
            print(f"User \"{user.username}\" already exists (id={user.id})")

        print("\nAll users:")
        for u in db.session.query(User).order_by(User.id).all():
            print(f"  - {u.username} (ID: {u.id}, role: {u.role})")
    return 0 if created else 1


if __name__ == "__main__":
    raise SystemExit(main())
