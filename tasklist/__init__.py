"""
tasklist - a single-session, line-driven to-do list manager.
"""

__version__ = "0.1.0"
