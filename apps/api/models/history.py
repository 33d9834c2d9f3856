from shared.db import db
from datetime import datetime, timezone


def _utcnow():
    return datetime.now(timezone.utc)


class UserHistory(db.Model):
    __tablename__ = "user_history"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    article_id = db.Column(db.String(1000), nullable=False)   # 기사 제목을 식별자로 사용
    read_at = db.Column(db.DateTime(timezone=True), default=_utcnow, index=True)
    category = db.Column(db.String(50), nullable=False)
    title = db.Column(db.String(1000), nullable=False)
    image_url = db.Column(db.String(1000))
    description = db.Column(db.Text)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "image_url": self.image_url,
            "description": self.description,
            "read_at": self.read_at.isoformat() if self.read_at else None,
        }
