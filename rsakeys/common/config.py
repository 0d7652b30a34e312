"""Runtime settings loaded from the environment (.env supported)."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_KEY_SIZE = int(os.getenv("RSAKEYS_KEY_SIZE", "2048"))
LOG_LEVEL = os.getenv("RSAKEYS_LOG_LEVEL", "INFO").upper()

# Fixed values, not overridable
PUBLIC_EXPONENT = 65537
MAX_KEY_FILE_SIZE = 10 * 1024
PRIVATE_KEY_SUFFIX = "pem"
PUBLIC_KEY_SUFFIX = "pub"
