"""Public marketing routes."""

from flask import Blueprint, render_template, redirect, url_for, flash
from restoconsult import content
from restoconsult.forms.contact import ContactForm
from restoconsult.services.contact import submit_inquiry
from restoconsult.store import get_client

main_bp = Blueprint('main', __name__)


@main_bp.route('/', methods=['GET', 'POST'])
def index():
    """Landing page with the contact form."""
    form = ContactForm()
    
    if form.validate_on_submit():
        result = submit_inquiry(get_client(), form.data)
        
        if result.ok:
            flash("Message sent successfully! We'll get back to you within 24 hours.", 'success')
            return redirect(url_for('main.index', _anchor='contact'))
        
        # Keep the submitted values so the visitor can try again
        flash(f'Error sending message: {result.error.message}', 'danger')
    
    return render_template('main/index.html',
                         form=form,
                         nav_items=content.NAV_ITEMS,
                         hero=content.HERO,
                         services=content.SERVICES,
                         process_steps=content.PROCESS_STEPS,
                         stats=content.STATS,
                         why_us=content.WHY_US,
                         office=content.OFFICE)
