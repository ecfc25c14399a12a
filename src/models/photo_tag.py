from models.database import db, utc_now
from sqlalchemy import UniqueConstraint


class PhotoTag(db.Model):
    """A user marking themselves as appearing in a photo."""
    __tablename__ = 'photo_tags'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    photo_id = db.Column(db.Integer, db.ForeignKey('photos.id', ondelete='CASCADE'), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)

    user = db.relationship('User', back_populates='tags')
    photo = db.relationship('Photo', back_populates='tags')

    __table_args__ = (
        UniqueConstraint('user_id', 'photo_id', name='uq_tag_user_photo'),
    )
