"""
Configuration module for BlogWare.
Centralizes all configuration settings and environment variables.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Server configuration
PORT = int(os.getenv("PORT", "8000"))
DEV = os.getenv("DEV", "false").lower() == "true"
HOST = os.getenv("HOST", "0.0.0.0")

# Application settings
APP_TITLE = "BlogWare"
APP_DESCRIPTION = "Markdown blog posts served by slug"
VERSION = "1.0"

# Content store settings
CONTENT_DIR = os.getenv("CONTENT_DIR", "content/blog")
CONTENT_EXTENSION = ".md"

# Front matter handling when title/date are absent: passthrough, default or reject
MISSING_FIELD_POLICIES = ("passthrough", "default", "reject")
MISSING_FIELD_POLICY = os.getenv("MISSING_FIELD_POLICY", "passthrough").strip().lower()
# Empty title default means "use the slug"
MISSING_TITLE_DEFAULT = os.getenv("MISSING_TITLE_DEFAULT", "")
MISSING_DATE_DEFAULT = os.getenv("MISSING_DATE_DEFAULT", "")

if MISSING_FIELD_POLICY not in MISSING_FIELD_POLICIES:
    raise RuntimeError(
        f"MISSING_FIELD_POLICY must be one of: {', '.join(MISSING_FIELD_POLICIES)}"
    )

# Rendering settings
SANITIZE_HTML = os.getenv("SANITIZE_HTML", "true").lower() == "true"
POST_URL_PREFIX = "/blog"

# Error responses
NOT_FOUND_STATUS = 404
NOT_FOUND_MESSAGE = "Not found"

# Logging settings
LOG_DIR = "logs"
LOG_ROTATION = "1 day"
LOG_RETENTION = "7 days"
LOG_LEVEL = "INFO"
