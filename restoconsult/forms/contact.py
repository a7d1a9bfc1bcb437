"""Public contact form."""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SelectField
from wtforms.validators import DataRequired, Email, Length, Optional
from restoconsult.models import ServiceInterest
from restoconsult.models.enums import choices


class ContactForm(FlaskForm):
    """Free consultation request."""
    name = StringField('Full Name', validators=[
        DataRequired(message='Name is required'),
        Length(max=100)
    ])
    email = StringField('Email', validators=[
        DataRequired(message='Email is required'),
        Email(message='Please enter a valid email address')
    ])
    phone = StringField('Phone', validators=[Optional(), Length(max=30)])
    company = StringField('Restaurant/Company', validators=[Optional(), Length(max=150)])
    service_interest = SelectField('Service of Interest',
                                   choices=[('', 'Select a service')] + choices(ServiceInterest),
                                   default='',
                                   validators=[Optional()])
    preferred_contact_time = StringField('Preferred Contact Time', validators=[
        Optional(),
        Length(max=100)
    ])
    message = TextAreaField('Message', validators=[
        DataRequired(message='Message is required')
    ])
