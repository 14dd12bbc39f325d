# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell the Plant Share app how to connect to its database
# and how to behave in each environment.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the pydantic-settings Settings model.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Infrastructure components and dependency providers

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
