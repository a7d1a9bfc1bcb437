"""Admin dashboard forms."""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SelectField, BooleanField, IntegerField
from wtforms.validators import DataRequired, Length, Optional, NumberRange, URL
from restoconsult.models import InquiryStatus
from restoconsult.models.enums import choices


class InquiryUpdateForm(FlaskForm):
    """Status and notes for one inquiry."""
    status = SelectField('Status', choices=choices(InquiryStatus))
    admin_notes = TextAreaField('Admin Notes', validators=[Optional()])


class BlogPostForm(FlaskForm):
    """Create/edit blog post."""
    # Content
    title = StringField('Title', validators=[
        DataRequired(message='Title is required'),
        Length(max=255)
    ])
    slug = StringField('Slug', validators=[Optional(), Length(max=255)])
    excerpt = TextAreaField('Excerpt', validators=[Optional()])
    content = TextAreaField('Content', validators=[
        DataRequired(message='Content is required')
    ])
    
    # Media
    thumbnail_url = StringField('Thumbnail URL', validators=[Optional(), URL(), Length(max=500)])
    video_url = StringField('Video URL', validators=[Optional(), URL(), Length(max=500)])
    video_duration = IntegerField('Video Duration (seconds)', validators=[
        Optional(),
        NumberRange(min=0)
    ])
    
    # Settings
    tags = StringField('Tags (comma separated)', validators=[Optional()])
    topic = StringField('Topic', validators=[Optional(), Length(max=100)])
    published = BooleanField('Published')
    featured = BooleanField('Featured')

    def load_post(self, post):
        """Fill the form from a stored post row."""
        for field in ('title', 'slug', 'excerpt', 'content', 'thumbnail_url',
                      'video_url', 'video_duration', 'topic', 'published', 'featured'):
            getattr(self, field).data = post.get(field)
        self.tags.data = ', '.join(post.get('tags') or [])
