from models.database import db, utc_now, isoformat_utc


class Photo(db.Model):
    __tablename__ = 'photos'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    section_id = db.Column(db.Integer, db.ForeignKey('sections.id', ondelete='CASCADE'), nullable=False)
    filename = db.Column(db.String(255), nullable=False)
    title = db.Column(db.String(255))
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)

    user = db.relationship('User', back_populates='photos')
    section = db.relationship('Section', back_populates='photos')
    votes = db.relationship('Vote', back_populates='photo', cascade="all, delete-orphan")
    comments = db.relationship('Comment', back_populates='photo', cascade="all, delete-orphan")
    tags = db.relationship('PhotoTag', back_populates='photo', cascade="all, delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "section_id": self.section_id,
            "filename": self.filename,
            "title": self.title,
            "created_at": isoformat_utc(self.created_at),
        }

    def __repr__(self):
        return f"<Photo(id={self.id}, filename='{self.filename}', user_id={self.user_id})>"
