"""
Daybook: a single-user, in-memory calendar and event manager.
"""

__version__ = "1.0.0"
