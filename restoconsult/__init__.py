"""Flask application factory."""

import os
from datetime import datetime
from flask import Flask, render_template
from .config import config
from .extensions import db, migrate, login_manager, bcrypt, csrf


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')
    
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    
    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    bcrypt.init_app(app)
    csrf.init_app(app)
    
    os.makedirs(app.instance_path, exist_ok=True)
    
    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)
    
    # User loader for Flask-Login
    from .models import User, InquiryStatus, ServiceInterest
    
    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, user_id)
    
    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404
    
    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return render_template('errors/500.html'), 500
    
    # Template filters
    @app.template_filter('format_date')
    def format_date_filter(value, format='%b %d, %Y'):
        """Format date string or datetime object."""
        if not value:
            return ''
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value)
            except ValueError:
                return value
        return value.strftime(format)
    
    @app.template_filter('status_label')
    def status_label_filter(value):
        return InquiryStatus(value).label
    
    @app.template_filter('status_badge')
    def status_badge_filter(value):
        return InquiryStatus(value).badge
    
    @app.template_filter('service_label')
    def service_label_filter(value):
        return ServiceInterest(value).label if value else ''
    
    # Context processors
    @app.context_processor
    def inject_globals():
        return dict(
            contact_email=app.config['CONTACT_EMAIL'],
            contact_phone=app.config['CONTACT_PHONE'],
            current_year=datetime.utcnow().year,
        )
    
    return app
