from core.extensions import db
from core.imports import datetime


class Profile(db.Model):
    __tablename__ = "profiles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), unique=True, nullable=False, index=True)  # auth service UUID
    full_name = db.Column(db.String(150), nullable=True)
    role = db.Column(db.String(150), default="customer")  # customer, admin
    phone = db.Column(db.String(20), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    orders = db.relationship("Order", backref="profile")
