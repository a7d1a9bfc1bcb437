"""Customer inquiry model."""

import uuid
from datetime import datetime
from restoconsult.extensions import db
from .enums import InquiryStatus


class Inquiry(db.Model):
    """Lead submitted through the public contact form."""
    __tablename__ = 'inquiries'
    
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(30))
    company = db.Column(db.String(150))
    service_interest = db.Column(db.String(50))  # ServiceInterest value
    message = db.Column(db.Text, nullable=False)
    preferred_contact_time = db.Column(db.String(100))
    status = db.Column(db.String(20), nullable=False, default=InquiryStatus.NEW.value)
    admin_notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    def __repr__(self):
        return f'<Inquiry {self.email}>'
