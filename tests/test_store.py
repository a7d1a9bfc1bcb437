import pytest

from restoconsult.models import InquiryStatus


def test_insert_applies_store_defaults(query_client):
    data, error = query_client.table('inquiries').insert({
        'name': 'Jane', 'email': 'jane@example.com', 'message': 'Hi',
    }).execute()

    assert error is None
    assert len(data) == 1
    assert data[0]['status'] == 'new'
    assert data[0]['id']
    assert data[0]['created_at'] is not None


def test_select_columns_and_order(query_client, make_inquiry):
    make_inquiry(age=2, name='Old')
    make_inquiry(age=0, name='Fresh')

    result = query_client.table('inquiries').select('id, name').order('created_at', ascending=False).execute()

    assert result.ok
    assert [row['name'] for row in result.data] == ['Fresh', 'Old']
    assert set(result.data[0]) == {'id', 'name'}


def test_eq_filter_and_single(query_client, make_inquiry):
    target = make_inquiry(name='Target')
    make_inquiry(name='Other')

    result = query_client.table('inquiries').select('*').eq('id', target.id).single().execute()

    assert result.ok
    assert result.data['name'] == 'Target'


def test_single_without_match_is_an_error(query_client):
    result = query_client.table('inquiries').select('*').eq('id', 'missing').single().execute()

    assert result.data is None
    assert 'rows returned' in result.error.message


def test_update_by_id_accepts_enum_members(query_client, make_inquiry):
    inquiry = make_inquiry()

    data, error = query_client.table('inquiries').update(
        {'status': InquiryStatus.CLOSED}
    ).eq('id', inquiry.id).execute()

    assert error is None
    assert data[0]['status'] == 'closed'


def test_update_and_delete_require_a_filter(query_client, make_inquiry):
    make_inquiry()

    assert 'WHERE' in query_client.table('inquiries').update({'status': 'closed'}).execute().error.message
    assert 'WHERE' in query_client.table('blog_posts').delete().execute().error.message


def test_delete_returns_removed_rows(query_client, make_post):
    post = make_post()

    data, error = query_client.table('blog_posts').delete().eq('id', post.id).execute()

    assert error is None
    assert [row['id'] for row in data] == [post.id]
    assert query_client.table('blog_posts').select('*').execute().data == []


def test_unknown_column_is_reported(query_client):
    result = query_client.table('inquiries').select('id, nope').execute()

    assert not result.ok
    assert 'nope' in result.error.message


def test_constraint_violation_is_reported_not_raised(query_client):
    result = query_client.table('inquiries').insert({'name': 'No message', 'email': 'x@example.com'}).execute()

    assert result.data is None
    assert result.error.message

    # The session is usable again after the rollback
    assert query_client.table('inquiries').select('*').execute().ok


def test_unknown_table_raises(query_client):
    with pytest.raises(KeyError):
        query_client.table('orders')
