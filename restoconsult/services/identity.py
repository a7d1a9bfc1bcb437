"""Signed-in identity passed explicitly to the services."""

from restoconsult.models import UserRole


class SessionContext:
    """Who is acting: id, email, role and account age."""

    def __init__(self, user_id, email, role=UserRole.EDITOR, name=None, created_at=None):
        self.user_id = user_id
        self.email = email
        self.role = UserRole.from_value(role.value if isinstance(role, UserRole) else role)
        self.name = name
        self.created_at = created_at

    @classmethod
    def from_user(cls, user):
        """Build a context from a Flask-Login user."""
        return cls(
            user_id=user.id,
            email=user.email,
            role=user.role,
            name=user.name,
            created_at=user.created_at,
        )

    @property
    def is_admin(self):
        return self.role is UserRole.ADMIN

    @property
    def role_label(self):
        return self.role.label

    def __repr__(self):
        return f'<SessionContext {self.email} ({self.role.value})>'
