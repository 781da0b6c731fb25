# __init__.py
# Exposes the demo seeding entry point.

from .seed_all import seed_all
