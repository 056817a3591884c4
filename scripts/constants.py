"""
Constants and configuration defaults for the schema site scripts.
"""

import re
from pathlib import Path

# Repository layout
ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "src"
PUBLIC_DIR = ROOT / "public"
CONFIG_FILE = ROOT / "site.yaml"

# Published base URL (display only)
DEFAULT_BASE_URL = "https://schemas.sitecoreai.dev/"
BASE_URL_ENV = "SCHEMA_BASE_URL"

# Pre-versioning layout lived in this directory
DEFAULT_FALLBACK_VERSION = "v1"
FALLBACK_VERSION_ENV = "SCHEMA_FALLBACK_VERSION"

# Page text
SITE_TITLE = "SitecoreAI Schemas"
SITE_DESCRIPTION = "Public JSON schema documents for SitecoreAI tools."
INDEX_FILENAME = "index.html"

# Allowed extensions
SCHEMA_EXTENSION = ".json"

# Version directories: v1, v2, v10 ...
VERSION_PATTERN = re.compile(r"^v(\d+)$")
