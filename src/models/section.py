from models.database import db, utc_now, isoformat_utc


class Section(db.Model):
    __tablename__ = "sections"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), unique=True, nullable=False)
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)

    photos = db.relationship('Photo', back_populates='section')

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": isoformat_utc(self.created_at),
        }

    def __repr__(self):
        return f"<Section(id={self.id}, name='{self.name}')>"
