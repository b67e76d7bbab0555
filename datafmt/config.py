"""
datafmt - runtime configuration
"""
import os

# Application version - single source of truth
VERSION = "1.0.0"

# Text inserted in place of a placeholder whose transformation failed
ERROR_SENTINEL = "#ERROR"

# Numeric timestamps below this are seconds since epoch, otherwise milliseconds
MILLISECONDS_THRESHOLD = 1e11

# Logging (see datafmt.utilities.logging)
LOG_LEVEL = os.environ.get("DATAFMT_LOG_LEVEL", "INFO").upper()
LOG_DIR = os.environ.get("DATAFMT_LOG_DIR") or None
