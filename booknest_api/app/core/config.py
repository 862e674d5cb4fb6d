"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts without any configuration; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "BookNest API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty string means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Credentials of the administrator account that every fresh
    # storage instance is seeded with.  The password is stored as
    # given; hashing belongs to the authentication layer.
    admin_name: str = os.getenv("ADMIN_NAME", "Admin User")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@booknest.com")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
