"""Database models package."""

from .enums import InquiryStatus, ServiceInterest, PostFilter, UserRole
from .user import User
from .inquiry import Inquiry
from .blog import BlogPost

# Tables reachable through the query client
TABLES = {
    Inquiry.__tablename__: Inquiry,
    BlogPost.__tablename__: BlogPost,
}

__all__ = [
    'InquiryStatus',
    'ServiceInterest',
    'PostFilter',
    'UserRole',
    'User',
    'Inquiry',
    'BlogPost',
    'TABLES',
]
