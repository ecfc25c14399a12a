from models.database import db
from sqlalchemy import UniqueConstraint


class Vote(db.Model):
    __tablename__ = 'votes'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    photo_id = db.Column(db.Integer, db.ForeignKey('photos.id', ondelete='CASCADE'), nullable=False)

    user = db.relationship('User', back_populates='votes')
    photo = db.relationship('Photo', back_populates='votes')

    __table_args__ = (
        UniqueConstraint('user_id', 'photo_id', name='uq_vote_user_photo'),
    )
