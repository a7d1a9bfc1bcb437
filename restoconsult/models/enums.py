"""Enumerations shared by models, forms and services."""

from enum import Enum


class InquiryStatus(str, Enum):
    """Workflow state of a customer inquiry."""
    NEW = 'new'
    IN_PROGRESS = 'in_progress'
    RESPONDED = 'responded'
    CLOSED = 'closed'

    @property
    def label(self):
        return INQUIRY_STATUS_LABELS[self]

    @property
    def badge(self):
        return INQUIRY_STATUS_BADGES[self]


class ServiceInterest(str, Enum):
    """Consulting services a lead can ask about."""
    CONCEPT_DEVELOPMENT = 'concept_development'
    MENU_ENGINEERING = 'menu_engineering'
    OPERATIONAL_EFFICIENCY = 'operational_efficiency'
    STAFF_TRAINING = 'staff_training'
    MARKETING_COST_CONTROL = 'marketing_cost_control'
    RECRUITING = 'recruiting'

    @property
    def label(self):
        return SERVICE_INTEREST_LABELS[self]


class PostFilter(str, Enum):
    """Buckets for the blog manager status filter."""
    ALL = 'all'
    PUBLISHED = 'published'
    DRAFT = 'draft'
    FEATURED = 'featured'


class UserRole(str, Enum):
    """Dashboard roles. Anything that is not admin is an editor."""
    ADMIN = 'admin'
    EDITOR = 'editor'

    @classmethod
    def from_value(cls, value):
        return cls.ADMIN if value == cls.ADMIN.value else cls.EDITOR

    @property
    def label(self):
        return 'Administrator' if self is UserRole.ADMIN else 'Editor'


INQUIRY_STATUS_LABELS = {
    InquiryStatus.NEW: 'New',
    InquiryStatus.IN_PROGRESS: 'In Progress',
    InquiryStatus.RESPONDED: 'Responded',
    InquiryStatus.CLOSED: 'Closed',
}

INQUIRY_STATUS_BADGES = {
    InquiryStatus.NEW: 'primary',
    InquiryStatus.IN_PROGRESS: 'warning',
    InquiryStatus.RESPONDED: 'success',
    InquiryStatus.CLOSED: 'secondary',
}

SERVICE_INTEREST_LABELS = {
    ServiceInterest.CONCEPT_DEVELOPMENT: 'Concept Development',
    ServiceInterest.MENU_ENGINEERING: 'Menu Engineering',
    ServiceInterest.OPERATIONAL_EFFICIENCY: 'Operational Efficiency',
    ServiceInterest.STAFF_TRAINING: 'Staff Training',
    ServiceInterest.MARKETING_COST_CONTROL: 'Marketing & Cost Control',
    ServiceInterest.RECRUITING: 'Recruiting',
}

# Every member needs a label; fail at import rather than at render time.
for _enum, _labels in ((InquiryStatus, INQUIRY_STATUS_LABELS),
                       (InquiryStatus, INQUIRY_STATUS_BADGES),
                       (ServiceInterest, SERVICE_INTEREST_LABELS)):
    _missing = set(_enum) - set(_labels)
    if _missing:
        raise RuntimeError(f'{_enum.__name__} members without labels: {sorted(m.value for m in _missing)}')


def choices(enum_cls):
    """(value, label) pairs for a WTForms SelectField."""
    return [(member.value, member.label) for member in enum_cls]
