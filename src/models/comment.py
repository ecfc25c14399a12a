from models.database import db, utc_now, isoformat_utc


class Comment(db.Model):
    __tablename__ = 'comments'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    photo_id = db.Column(db.Integer, db.ForeignKey('photos.id', ondelete='CASCADE'), nullable=False)
    text = db.Column("comment", db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)

    user = db.relationship('User', back_populates='comments')
    photo = db.relationship('Photo', back_populates='comments')

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "photo_id": self.photo_id,
            "comment": self.text,
            "username": self.user.username if self.user else None,
            "created_at": isoformat_utc(self.created_at),
        }
