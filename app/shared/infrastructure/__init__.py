"""
Infrastructure layer package for Plant Share Application.
Provides the database engine and session management.
"""

__all__ = []
