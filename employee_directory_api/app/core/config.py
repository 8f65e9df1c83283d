"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a deployment you
override them via environment variables.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Location of the JSON file holding the employee collection.  A
    # relative path is resolved against the project root by the
    # ``storage`` module.
    data_file: str = os.getenv("DATA_FILE", os.path.join("data", "employees.json"))

    # All routes are mounted below this prefix, e.g. ``/api/employees``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))

    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list, ignoring blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before importing this module.
settings = Settings()
