import re

import pytest

from restoconsult.models import PostFilter
from restoconsult.services.blog import (
    BlogManager,
    estimate_reading_time,
    filter_posts,
    generate_slug,
    parse_tags,
)

SLUG_RE = re.compile(r'^[a-z0-9]+(-[a-z0-9]+)*$')


@pytest.mark.parametrize('title', [
    'Hello World',
    '  Ten Tips -- for   Better Menus!  ',
    '---Leading and trailing---',
    'Café & Bar: 2024 Edition',
    'UPPER case',
])
def test_generate_slug_is_url_safe(title):
    slug = generate_slug(title)

    assert SLUG_RE.match(slug)
    assert '--' not in slug


def test_generate_slug_examples():
    assert generate_slug('Hello World') == 'hello-world'
    assert generate_slug('Ten Tips -- for Better Menus!') == 'ten-tips-for-better-menus'


def test_generate_slug_drops_punctuation_inside_words():
    assert generate_slug("Chef's Guide to Pricing") == 'chefs-guide-to-pricing'
    assert generate_slug('Menu:Pricing 101') == 'menupricing-101'
    assert generate_slug('Café & Bar') == 'cafe-bar'


def test_generate_slug_never_empty():
    assert generate_slug('!!!') == 'post'
    assert generate_slug('') == 'post'


@pytest.mark.parametrize('words, minutes', [(1, 1), (200, 1), (201, 2), (400, 2), (1001, 6)])
def test_estimate_reading_time(words, minutes):
    assert estimate_reading_time(' '.join(['word'] * words)) == minutes


def test_estimate_reading_time_at_least_one():
    assert estimate_reading_time('short') == 1
    assert estimate_reading_time('   ') == 1


def test_parse_tags():
    assert parse_tags('a, b ,, c') == ['a', 'b', 'c']
    assert parse_tags('') == []
    assert parse_tags(None) == []


POSTS = [
    {'title': 'Menu pricing', 'content': 'Cost every plate', 'tags': ['Menu'], 'topic': None,
     'published': True, 'featured': False},
    {'title': 'Hiring chefs', 'content': 'Trial shifts', 'tags': ['recruiting'], 'topic': 'People',
     'published': False, 'featured': True},
    {'title': 'Draft notes', 'content': 'Nothing yet', 'tags': [], 'topic': 'Operations',
     'published': False, 'featured': False},
]


@pytest.mark.parametrize('status, titles', [
    (PostFilter.ALL, ['Menu pricing', 'Hiring chefs', 'Draft notes']),
    (PostFilter.PUBLISHED, ['Menu pricing']),
    (PostFilter.DRAFT, ['Hiring chefs', 'Draft notes']),
    (PostFilter.FEATURED, ['Hiring chefs']),
    ('draft', ['Hiring chefs', 'Draft notes']),
])
def test_filter_posts_by_status(status, titles):
    assert [p['title'] for p in filter_posts(POSTS, status)] == titles


@pytest.mark.parametrize('search, titles', [
    ('MENU', ['Menu pricing']),
    ('trial', ['Hiring chefs']),
    ('recruit', ['Hiring chefs']),
    ('operations', ['Draft notes']),
    ('zzz', []),
])
def test_filter_posts_search(search, titles):
    assert [p['title'] for p in filter_posts(POSTS, PostFilter.ALL, search)] == titles


def test_filter_posts_combines_status_and_search():
    assert filter_posts(POSTS, PostFilter.PUBLISHED, 'hiring') == []


def test_build_payload_derives_fields(app, query_client, identity):
    manager = BlogManager(query_client, identity)

    payload = manager.build_payload({
        'title': 'Ten Tips for Better Menus',
        'slug': '',
        'content': 'word ' * 450,
        'tags': 'menu, pricing,,',
        'video_duration': 90,
        'published': True,
        'featured': False,
    })

    assert payload['slug'] == 'ten-tips-for-better-menus'
    assert payload['reading_time'] == 3
    assert payload['tags'] == ['menu', 'pricing']
    assert payload['video_duration'] == 90
    assert payload['published_at'] is not None
    assert payload['author_id'] == identity.user_id
    assert payload['excerpt'] is None


def test_build_payload_keeps_explicit_slug_and_clears_published_at(app, query_client, identity):
    manager = BlogManager(query_client, identity)

    payload = manager.build_payload({'title': 'Anything', 'slug': 'Custom Slug', 'content': 'x'})

    assert payload['slug'] == 'custom-slug'
    assert payload['published'] is False
    assert payload['published_at'] is None


def test_save_creates_then_updates(query_client, identity):
    manager = BlogManager(query_client, identity)

    created = manager.save({'title': 'First post', 'content': 'Hello there', 'tags': 'a'})
    assert created.ok
    assert [p['slug'] for p in manager.posts] == ['first-post']

    updated = manager.save({'title': 'First post, revised', 'slug': 'first-post', 'content': 'Hello',
                            'published': True}, post_id=created.data['id'])
    assert updated.ok
    assert len(manager.posts) == 1
    assert manager.posts[0]['title'] == 'First post, revised'
    assert manager.posts[0]['published'] is True


def test_save_duplicate_slug_reports_error(query_client, identity, make_post):
    make_post(slug='taken')
    manager = BlogManager(query_client, identity)

    result = manager.save({'title': 'Taken', 'content': 'x'})

    assert not result.ok
    assert manager.posts == []


def test_toggle_published_resets_timestamp(query_client, identity, make_post):
    post = make_post(published=False)
    manager = BlogManager(query_client, identity)

    row = manager.get(post.id).data
    assert manager.toggle_published(row).ok
    published = manager.get(post.id).data
    assert published['published'] is True
    assert published['published_at'] is not None

    assert manager.toggle_published(published).ok
    draft = manager.get(post.id).data
    assert draft['published'] is False
    assert draft['published_at'] is None


def test_delete_refetches(query_client, identity, make_post):
    keep = make_post()
    gone = make_post()
    manager = BlogManager(query_client, identity)
    manager.load()

    assert manager.delete(gone.id).ok
    assert [p['id'] for p in manager.posts] == [keep.id]


def test_load_failure_keeps_collection(app, failing_client, identity):
    manager = BlogManager(failing_client, identity)

    result = manager.load()

    assert result.error.message == 'permission denied for table'
    assert manager.posts == []
