# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder contains the Plant Share application code
# and records its version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version and metadata for the Plant Share
# community leaderboard and profile API.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (package discovery)

"""
Plant Share Application - Community Leaderboards and Profiles

Backend API ranking community members by plants grown, CO2 offset and
engagement, and serving public user profiles.
"""

__version__ = "1.0.0"
__title__ = "Plant Share Backend API"
__description__ = "Community leaderboards and public profiles for Plant Share"
__author__ = "Plant Share Team"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
]
