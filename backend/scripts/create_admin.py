#!/usr/bin/env python
# scripts/create_admin.py

import argparse
import os
import sys

# This script is intended to be run from the command line.
# We add the backend directory to the Python path to allow imports.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from masjid_manager import create_app
from masjid_manager.repositories import get_repository
from masjid_manager.services.seed_service import ensure_admin

def create_admin(email, password, name):
    """
    Creates the first Admin account, or resets its password when it exists.

    When the database holds no mosque yet, a default mosque is created and
    the admin is attached to it.
    """
    app = create_app(os.getenv('FLASK_CONFIG') or 'default')
    with app.app_context():
        print("--- Starting the Create Admin Script ---")
        user, created = ensure_admin(get_repository(), email, password, name=name)
        if created:
            print(f"SUCCESS: Admin {user['email']} created for mosque {user['mosque_id']}.")
        else:
            print(f"INFO: Admin {user['email']} already existed. Password has been reset.")
        print("--- Create admin script finished. ---")

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Create or reset the Admin account.")
    parser.add_argument('--email', default='admin@masjid.com')
    parser.add_argument('--password', default='password123')
    parser.add_argument('--name', default='Admin')
    args = parser.parse_args()
    create_admin(args.email, args.password, args.name)
