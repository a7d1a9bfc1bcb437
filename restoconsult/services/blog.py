"""Admin blog post workflow."""

import math
import re
from datetime import datetime
from flask import current_app
from slugify import slugify
from restoconsult.models import PostFilter

WORDS_PER_MINUTE = 200

# Punctuation is dropped rather than turned into a separator
_PUNCTUATION = re.compile(r"[^\w\s-]|_")


def generate_slug(title):
    """URL-safe slug: lowercase ``[a-z0-9-]`` without stray hyphens."""
    return slugify(_PUNCTUATION.sub('', title or '')) or 'post'


def estimate_reading_time(content, words_per_minute=WORDS_PER_MINUTE):
    """Minutes needed to read ``content``, never less than one."""
    word_count = len((content or '').split())
    return max(1, math.ceil(word_count / words_per_minute))


def parse_tags(raw):
    """Split a comma separated tag string, dropping empty entries."""
    return [tag.strip() for tag in (raw or '').split(',') if tag.strip()]


def filter_posts(posts, status=PostFilter.ALL, search=''):
    """Narrow by publish/feature bucket, then by a case-insensitive search
    over title, content, tags and topic."""
    status = PostFilter(status or PostFilter.ALL)
    filtered = posts
    
    if status is PostFilter.PUBLISHED:
        filtered = [p for p in filtered if p['published']]
    elif status is PostFilter.DRAFT:
        filtered = [p for p in filtered if not p['published']]
    elif status is PostFilter.FEATURED:
        filtered = [p for p in filtered if p['featured']]
    
    if search:
        query = search.lower()
        filtered = [
            p for p in filtered
            if query in p['title'].lower()
            or query in p['content'].lower()
            or any(query in tag.lower() for tag in p.get('tags') or [])
            or query in (p.get('topic') or '').lower()
        ]
    
    return filtered


class BlogManager:
    """Holds the posts fetched for one admin page view."""

    def __init__(self, client, identity):
        self.client = client
        self.identity = identity
        self.posts = []

    def load(self):
        """Fetch all posts, newest first."""
        result = self.client.table('blog_posts').select('*').order(
            'created_at', ascending=False
        ).execute()
        if result.ok:
            self.posts = result.data or []
        return result

    def get(self, post_id):
        return self.client.table('blog_posts').select('*').eq('id', post_id).single().execute()

    def filter(self, status=PostFilter.ALL, search=''):
        return filter_posts(self.posts, status, search)

    def build_payload(self, form_data):
        """Row written on create and on edit."""
        words_per_minute = current_app.config.get('WORDS_PER_MINUTE', WORDS_PER_MINUTE)
        slug = form_data.get('slug')
        published = bool(form_data.get('published'))
        video_duration = form_data.get('video_duration')
        return {
            'title': form_data['title'],
            'slug': generate_slug(slug) if slug else generate_slug(form_data['title']),
            'excerpt': form_data.get('excerpt') or None,
            'content': form_data['content'],
            'thumbnail_url': form_data.get('thumbnail_url') or None,
            'video_url': form_data.get('video_url') or None,
            'video_duration': int(video_duration) if video_duration not in (None, '') else None,
            'tags': parse_tags(form_data.get('tags')),
            'topic': form_data.get('topic') or None,
            'reading_time': estimate_reading_time(form_data['content'], words_per_minute),
            'published': published,
            'published_at': datetime.utcnow() if published else None,
            'featured': bool(form_data.get('featured')),
            'author_id': self.identity.user_id,
        }

    def save(self, form_data, post_id=None):
        """Insert a new post, or update ``post_id`` when editing."""
        table = self.client.table('blog_posts')
        payload = self.build_payload(form_data)
        if post_id is None:
            result = table.insert(payload).single().execute()
        else:
            result = table.update(payload).eq('id', post_id).single().execute()
        
        if result.ok:
            current_app.logger.info('Post %s %s by %s', payload['slug'],
                                    'created' if post_id is None else 'updated',
                                    self.identity.email)
            self.load()
        return result

    def delete(self, post_id):
        result = self.client.table('blog_posts').delete().eq('id', post_id).execute()
        if result.ok:
            current_app.logger.info('Post %s deleted by %s', post_id, self.identity.email)
            self.load()
        return result

    def toggle_published(self, post):
        """Flip ``published``; ``published_at`` is reset on every flip."""
        published = not post['published']
        result = self.client.table('blog_posts').update({
            'published': published,
            'published_at': datetime.utcnow() if published else None,
        }).eq('id', post['id']).execute()
        if result.ok:
            self.load()
        return result
