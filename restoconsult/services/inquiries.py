"""Admin inquiries list, detail and status workflow."""

from urllib.parse import quote
from flask import current_app
from restoconsult.models import InquiryStatus, ServiceInterest

ALL = 'all'


def filter_inquiries(inquiries, status=ALL, search=''):
    """Narrow by status, then by a case-insensitive search.

    Search looks at name, email, company and message only.
    """
    filtered = inquiries
    
    if status and status != ALL:
        status = InquiryStatus(status)
        filtered = [i for i in filtered if i['status'] == status.value]
    
    if search:
        query = search.lower()
        filtered = [
            i for i in filtered
            if query in i['name'].lower()
            or query in i['email'].lower()
            or query in (i.get('company') or '').lower()
            or query in i['message'].lower()
        ]
    
    return filtered


def mailto_link(inquiry):
    """Pre-filled ``mailto:`` reply for an inquiry."""
    service = inquiry.get('service_interest')
    topic = ServiceInterest(service).label if service else 'our services'
    body = (
        f"Hi {inquiry['name']},\r\n\r\n"
        f"Thank you for your inquiry about {topic}..."
    )
    return f"mailto:{inquiry['email']}?subject={quote('Re: Your Inquiry')}&body={quote(body)}"


class InquiriesManager:
    """Holds the inquiries fetched for one admin page view."""

    def __init__(self, client):
        self.client = client
        self.inquiries = []

    def load(self):
        """Fetch all inquiries, newest first."""
        result = self.client.table('inquiries').select('*').order(
            'created_at', ascending=False
        ).execute()
        if result.ok:
            self.inquiries = result.data or []
        return result

    def get(self, inquiry_id):
        return self.client.table('inquiries').select('*').eq('id', inquiry_id).single().execute()

    def filter(self, status=ALL, search=''):
        return filter_inquiries(self.inquiries, status, search)

    def update_status(self, inquiry_id, new_status, admin_notes=''):
        """Write status and notes together, then patch the loaded row.

        ``new_status`` is whatever the manage form had selected, which is
        the row's current status unless the admin changed it.
        Rows are only patched if this manager already ran ``load()``; the
        admin route works on a fresh manager and redirects afterwards.
        """
        new_status = InquiryStatus(new_status)
        notes = admin_notes or None
        result = self.client.table('inquiries').update({
            'status': new_status,
            'admin_notes': notes,
        }).eq('id', inquiry_id).execute()
        
        if not result.ok:
            return result
        
        self.inquiries = [
            dict(i, status=new_status.value, admin_notes=notes) if i['id'] == inquiry_id else i
            for i in self.inquiries
        ]
        current_app.logger.info('Inquiry %s marked as %s', inquiry_id, new_status.value)
        return result
