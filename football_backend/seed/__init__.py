# __init__.py
# Imports all seed functions for easy batch seeding.

from .seed_all import seed_default_admin, seed_demo_data, seed_all
