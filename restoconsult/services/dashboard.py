"""Admin dashboard counters and recent activity."""

from flask import current_app
from restoconsult.models import InquiryStatus

RECENT_LIMIT = 5


class DashboardStats:
    """Counters over the full inquiries and blog_posts collections."""

    def __init__(self, total_inquiries=0, new_inquiries=0, total_posts=0,
                 published_posts=0, recent_inquiries=None, error=None):
        self.total_inquiries = total_inquiries
        self.new_inquiries = new_inquiries
        self.total_posts = total_posts
        self.published_posts = published_posts
        self.recent_inquiries = recent_inquiries or []
        self.error = error

    @classmethod
    def from_rows(cls, inquiries, posts, limit=RECENT_LIMIT):
        recent = sorted(inquiries, key=lambda i: i['created_at'], reverse=True)[:limit]
        return cls(
            total_inquiries=len(inquiries),
            new_inquiries=sum(1 for i in inquiries if i['status'] == InquiryStatus.NEW.value),
            total_posts=len(posts),
            published_posts=sum(1 for p in posts if p['published']),
            recent_inquiries=recent,
        )

    @classmethod
    def collect(cls, client):
        """Fetch both tables and reduce them in memory.

        A failure on either fetch yields zeroed counters with the error set.
        """
        inquiries, error = client.table('inquiries').select(
            'id, status, created_at, name, email, service_interest'
        ).execute()
        if error:
            return cls(error=error)
        
        posts, error = client.table('blog_posts').select(
            'id, published, created_at, title'
        ).execute()
        if error:
            return cls(error=error)
        
        limit = current_app.config.get('RECENT_INQUIRIES_LIMIT', RECENT_LIMIT)
        return cls.from_rows(inquiries or [], posts or [], limit)
