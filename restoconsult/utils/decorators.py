"""Access decorators for the admin dashboard."""

from functools import wraps
from flask import redirect, url_for, flash
from flask_login import current_user, logout_user
from restoconsult.services.identity import SessionContext


def staff_required(f):
    """Require a signed-in, active user and pass ``identity`` to the view.

    Admins and editors both get through; finer rules belong to the store.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            flash('Please sign in to access the admin panel.', 'info')
            return redirect(url_for('auth.login'))
        if not current_user.is_active:
            logout_user()
            flash('Your account has been deactivated.', 'danger')
            return redirect(url_for('auth.login'))
        kwargs['identity'] = SessionContext.from_user(current_user)
        return f(*args, **kwargs)
    return decorated_function
