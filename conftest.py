"""Global pytest configuration."""

import os

# Pin settings for tests before any imports
os.environ.setdefault("TRIPLINE_API_URL", "https://api.tripline.test")
