"""Seed script to populate the database with sample data."""

from datetime import datetime, timedelta
from restoconsult import create_app
from restoconsult.extensions import db
from restoconsult.models import User, Inquiry, BlogPost, InquiryStatus, ServiceInterest, UserRole
from restoconsult.services.blog import generate_slug, estimate_reading_time


def seed_database():
    """Seed the database with sample data."""
    app = create_app()
    
    with app.app_context():
        # Create tables
        db.create_all()
        
        # Check if already seeded
        if User.query.filter_by(email='admin@restaurantconsultants.com').first():
            print('Database already seeded!')
            return
        
        print('Seeding database...')
        
        # Create Admin and Editor
        admin = User(
            email='admin@restaurantconsultants.com',
            name='Admin User',
            role=UserRole.ADMIN.value
        )
        admin.set_password('admin123')
        editor = User(
            email='editor@restaurantconsultants.com',
            name='Content Editor',
            role=UserRole.EDITOR.value
        )
        editor.set_password('editor123')
        db.session.add_all([admin, editor])
        db.session.flush()  # Get user IDs
        
        now = datetime.utcnow()
        inquiries_data = [
            {'name': 'Amina Otieno', 'email': 'amina@goldenfork.co.ke', 'company': 'The Golden Fork',
             'service_interest': ServiceInterest.MENU_ENGINEERING,
             'message': 'Our food cost is above 38% and we want to rework the menu before the holidays.',
             'status': InquiryStatus.NEW},
            {'name': 'David Kamau', 'email': 'david@nyamachoma.com', 'phone': '+254 722 000 111',
             'service_interest': ServiceInterest.STAFF_TRAINING,
             'message': 'We are opening a second branch and need a front-of-house training plan.',
             'preferred_contact_time': 'Weekdays after 3pm',
             'status': InquiryStatus.IN_PROGRESS},
            {'name': 'Grace Wanjiru', 'email': 'grace@example.com',
             'message': 'Looking for help with a cafe concept in Kilimani.',
             'service_interest': ServiceInterest.CONCEPT_DEVELOPMENT,
             'status': InquiryStatus.RESPONDED,
             'admin_notes': 'Sent proposal on the first call.'},
            {'name': 'Peter Mwangi', 'email': 'peter@example.com', 'company': 'Mwangi Grill',
             'message': 'Need two sous chefs urgently.',
             'service_interest': ServiceInterest.RECRUITING,
             'status': InquiryStatus.CLOSED},
        ]
        
        for offset, data in enumerate(inquiries_data):
            data['status'] = data['status'].value
            data['service_interest'] = data['service_interest'].value
            db.session.add(Inquiry(created_at=now - timedelta(days=offset), **data))
        
        posts_data = [
            {
                'title': 'Five Menu Engineering Wins You Can Ship This Month',
                'excerpt': 'Small menu changes that move margin fast.',
                'content': ('Start by sorting every dish by contribution margin and popularity. '
                            'Stars stay, puzzles get repositioned, plowhorses get re-costed and '
                            'dogs leave the menu. ') * 40,
                'tags': ['menu', 'profitability'],
                'topic': 'Menu Engineering',
                'published': True,
                'featured': True,
            },
            {
                'title': 'Hiring Your First Kitchen Manager',
                'content': 'What to look for, what to pay, and how to run the trial shift.',
                'tags': ['recruiting', 'kitchen'],
                'topic': 'Recruiting',
                'published': False,
            },
        ]
        
        for data in posts_data:
            post = BlogPost(
                slug=generate_slug(data['title']),
                reading_time=estimate_reading_time(data['content']),
                published_at=now if data.get('published') else None,
                author_id=admin.id,
                **data
            )
            db.session.add(post)
        
        db.session.commit()
        print('Database seeded successfully!')
        print('Admin login: admin@restaurantconsultants.com / admin123')
        print('Editor login: editor@restaurantconsultants.com / editor123')


if __name__ == '__main__':
    seed_database()
