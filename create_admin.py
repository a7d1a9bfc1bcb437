#!/usr/bin/env python3
"""
Script to create an admin dashboard account.
Run this script with DATABASE_URL pointing at the target database.
"""

from restoconsult import create_app
from restoconsult.extensions import db
from restoconsult.models import User, UserRole


def create_admin_user(email, password, name, role=UserRole.ADMIN):
    """
    Create a dashboard user, or promote an existing one.
    
    Args:
        email: Login email address
        password: Password (will be hashed)
        name: Full name
        role: UserRole, admin by default
    """
    user = User.query.filter_by(email=email).first()
    if user:
        print(f"❌ User with email {email} already exists!")
        print(f"   Current role: {user.role}")
        
        update = input(f"Do you want to update this user to {role.value} role? (yes/no): ").lower()
        if update == 'yes':
            user.role = role.value
            db.session.commit()
            print(f"✅ User {email} updated to {role.value} role!")
        return user
    
    user = User(email=email, name=name, role=role.value)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    
    print(f"✅ {role.label} account created successfully!")
    print(f"   Email: {email}")
    print(f"   Name: {name}")
    print(f"   Role: {role.value}")
    print(f"\n🔐 You can now sign in with these credentials at /auth")
    return user


def main():
    print("=" * 60)
    print("Restaurant Consultants - Admin User Creation")
    print("=" * 60)
    print()
    
    print("Enter admin user details:")
    email = input("Email: ").strip().lower()
    password = input("Password: ").strip()
    name = input("Full Name: ").strip()
    role = input("Role (admin/editor) [admin]: ").strip().lower() or 'admin'
    
    print()
    print("Creating user with:")
    print(f"  Email: {email}")
    print(f"  Name: {name}")
    print(f"  Role: {UserRole.from_value(role).value}")
    print()
    
    confirm = input("Proceed? (yes/no): ").lower()
    if confirm != 'yes':
        print("❌ Admin creation cancelled.")
        return
    
    app = create_app()
    with app.app_context():
        db.create_all()
        create_admin_user(email, password, name, UserRole.from_value(role))


if __name__ == '__main__':
    main()
