"""Public contact intake."""

from flask import current_app
from restoconsult.models import ServiceInterest


def build_inquiry_row(form_data):
    """Map contact form fields to an ``inquiries`` row; blanks become NULL."""
    service = form_data.get('service_interest') or None
    if service:
        service = ServiceInterest(service).value
    return {
        'name': form_data['name'],
        'email': form_data['email'],
        'phone': form_data.get('phone') or None,
        'company': form_data.get('company') or None,
        'service_interest': service,
        'message': form_data['message'],
        'preferred_contact_time': form_data.get('preferred_contact_time') or None,
    }


def submit_inquiry(client, form_data):
    """Insert one inquiry. The store fills in the ``new`` status."""
    result = client.table('inquiries').insert(build_inquiry_row(form_data)).execute()
    if result.ok:
        current_app.logger.info('New inquiry from %s', form_data['email'])
    return result
