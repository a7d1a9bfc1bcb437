"""Dashboard user model."""

import uuid
from datetime import datetime
from flask_login import UserMixin
from restoconsult.extensions import db, bcrypt
from .enums import UserRole


class User(UserMixin, db.Model):
    """Staff account that can sign in to the admin dashboard."""
    __tablename__ = 'users'
    
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    role = db.Column(db.String(20), nullable=False, default=UserRole.EDITOR.value)
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    # Relationships
    posts = db.relationship('BlogPost', backref='author', lazy='dynamic')
    
    def set_password(self, password):
        """Hash and set the password."""
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')
    
    def check_password(self, password):
        """Check if password matches."""
        return bcrypt.check_password_hash(self.password_hash, password)
    
    @property
    def user_role(self):
        return UserRole.from_value(self.role)
    
    def is_admin(self):
        """Check if user is admin."""
        return self.user_role is UserRole.ADMIN
    
    def __repr__(self):
        return f'<User {self.email}>'
