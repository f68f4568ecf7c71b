"""
Configuration

Module-level settings, overridable through environment variables.
"""

import os

API_PREFIX = "/api"
LOG_FILE_PATH = os.getenv("POKELOGS_LOG_FILE", "logs.txt")  # plain text, one record per line
LOG_LEVEL = os.getenv("POKELOGS_LOG_LEVEL", "WARNING")

DATE_FORMAT = "%d/%m/%Y"
DATE_EXAMPLE = "02/09/2023"
DEFAULT_PERIOD = 7
MAX_PERIOD = 3660  # ten years of daily buckets

CHART_STEP_WIDTH = 4
CHART_HEIGHT = 8

UNKNOWN_LABEL = "desconocido"
