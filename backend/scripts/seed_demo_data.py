#!/usr/bin/env python
# scripts/seed_demo_data.py

import argparse
import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from masjid_manager import create_app
from masjid_manager.repositories import get_repository
from masjid_manager.services.seed_service import seed_demo_data, export_snapshot

def main(export_path=None):
    """
    Loads the demo mosques, records and admin into an empty database.

    Nothing is written when mosques already exist. With --export the
    resulting data is also dumped as camelCase JSON, the format the
    dashboard reads.
    """
    app = create_app(os.getenv('FLASK_CONFIG') or 'default')
    with app.app_context():
        print("--- Starting the Demo Data Script ---")
        repository = get_repository()
        if seed_demo_data(repository):
            print("SUCCESS: Demo data loaded.")
        else:
            print("INFO: Mosques already exist. Demo data was not loaded.")

        if export_path:
            with open(export_path, 'w', encoding='utf-8') as f:
                json.dump(export_snapshot(repository), f, indent=2)
            print(f"INFO: Snapshot written to {export_path}.")
        print("--- Demo data script finished. ---")

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Seed the database with demo data.")
    parser.add_argument('--export', metavar='PATH', help="Also write all data as JSON to PATH.")
    args = parser.parse_args()
    main(args.export)
