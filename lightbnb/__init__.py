"""
LightBnB data access layer.
Users, reservations and property search over an async SQLAlchemy session.
"""

__version__ = "1.0.0"
