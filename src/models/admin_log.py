from models.database import db, utc_now, isoformat_utc


class AdminLog(db.Model):
    __tablename__ = 'admin_logs'

    id = db.Column(db.Integer, primary_key=True)
    admin_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'))
    action = db.Column(db.String(100))
    target_type = db.Column(db.String(50))
    target_id = db.Column(db.Integer)
    details = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)

    admin = db.relationship('User', back_populates='admin_logs')

    def to_dict(self):
        return {
            "id": self.id,
            "admin_id": self.admin_id,
            "admin_username": self.admin.username if self.admin else None,
            "action": self.action,
            "target_type": self.target_type,
            "target_id": self.target_id,
            "details": self.details,
            "created_at": isoformat_utc(self.created_at),
        }

    def __repr__(self):
        return f"<AdminLog(id={self.id}, action='{self.action}', target={self.target_type}:{self.target_id})>"
