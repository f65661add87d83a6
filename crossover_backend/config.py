"""Environment configuration for the CrossForge backend."""

import os

from dotenv import load_dotenv

load_dotenv()

# CORS origin of a deployed frontend; local dev origins are always allowed
FRONTEND_URL = os.getenv("FRONTEND_URL")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Series used when a request asks for standard values without naming one
DEFAULT_E_SERIES = os.getenv("DEFAULT_E_SERIES", "E24")
