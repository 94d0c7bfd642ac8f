#!/usr/bin/env python3
"""
Script to create an admin user for LuxDrive, or promote an existing account.
Uses the database configured by DATABASE_URL / FLASK_CONFIG.
"""

from getpass import getpass

from luxdrive import create_app, db
from luxdrive.models import User


def create_admin_user(email, password, name):
    """
    Create an admin user.

    Args:
        email: Admin email address
        password: Admin password (will be hashed)
        name: Admin full name
    """
    user = User.query.filter_by(email=email).first()
    if user:
        print(f"User with email {email} already exists!")
        print(f"   Current role: {user.role}")

        # Ask if they want to update to admin
        update = input("Do you want to update this user to admin role? (yes/no): ").lower()
        if update == 'yes':
            user.role = 'admin'
            db.session.commit()
            print(f"User {email} updated to admin role!")
        return

    admin = User(email=email, name=name, role='admin')
    admin.set_password(password)
    db.session.add(admin)
    db.session.commit()

    print("Admin user created successfully!")
    print(f"   Email: {email}")
    print(f"   Name: {name}")
    print("   Role: admin")
    print("\nYou can now log in with these credentials at /auth/login")


def main():
    print("=" * 60)
    print("LuxDrive - Admin User Creation")
    print("=" * 60)
    print()

    # Get admin details from user input
    print("Enter admin user details:")
    email = input("Email: ").strip().lower()
    password = getpass("Password: ").strip()
    name = input("Full Name: ").strip()

    print()
    print("Creating admin user with:")
    print(f"  Email: {email}")
    print(f"  Name: {name}")
    print()

    confirm = input("Proceed? (yes/no): ").lower()
    if confirm != 'yes':
        print("Admin creation cancelled.")
        return

    app = create_app()
    with app.app_context():
        db.create_all()
        create_admin_user(email, password, name)


if __name__ == '__main__':
    main()
