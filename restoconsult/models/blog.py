"""Blog post model."""

import uuid
from datetime import datetime
from restoconsult.extensions import db


class BlogPost(db.Model):
    """Article or video post managed from the admin dashboard."""
    __tablename__ = 'blog_posts'
    
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    excerpt = db.Column(db.Text)
    content = db.Column(db.Text, nullable=False)
    thumbnail_url = db.Column(db.String(500))
    video_url = db.Column(db.String(500))
    video_duration = db.Column(db.Integer)  # seconds
    tags = db.Column(db.JSON, nullable=False, default=list)
    topic = db.Column(db.String(100))
    reading_time = db.Column(db.Integer)  # minutes
    published = db.Column(db.Boolean, nullable=False, default=False)
    published_at = db.Column(db.DateTime)
    featured = db.Column(db.Boolean, nullable=False, default=False)
    author_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    def __repr__(self):
        return f'<BlogPost {self.slug}>'
