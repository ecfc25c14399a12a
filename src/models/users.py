from flask_bcrypt import Bcrypt
from models.database import db, utc_now, isoformat_utc
from sqlalchemy import Enum

bcrypt = Bcrypt()


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(255), unique=True, nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=True)
    password_hash = db.Column("password", db.String(255), nullable=True)
    role = db.Column(Enum("user", "admin", name="role_enum"), default="user", nullable=False)
    is_banned = db.Column(db.Boolean, default=False, nullable=False)
    profile_picture = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)

    photos = db.relationship('Photo', back_populates='user', cascade="all, delete-orphan")
    votes = db.relationship('Vote', back_populates='user', cascade="all, delete-orphan")
    comments = db.relationship('Comment', back_populates='user', cascade="all, delete-orphan")
    tags = db.relationship('PhotoTag', back_populates='user', cascade="all, delete-orphan")
    admin_logs = db.relationship('AdminLog', back_populates='admin', cascade="all, delete-orphan")

    def __init__(self, username, email=None, password=None, role="user"):
        self.username = username
        self.email = email
        self.role = role
        self.is_banned = False
        if password:
            self.set_password(password)

    @property
    def is_admin(self):
        return self.role == "admin"

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        if not self.password_hash:
            return False
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "profile_picture": self.profile_picture,
            "created_at": isoformat_utc(self.created_at),
        }

    def to_admin_dict(self):
        data = self.to_dict()
        data.update({
            "email": self.email,
            "role": self.role,
            "is_banned": bool(self.is_banned),
        })
        return data

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
