"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    RUBOCOP_COMMAND      — RuboCop executable name or absolute path (default: rubocop)
    RUBOCOP_MAX_BUFFER   — Max bytes captured per output stream (default: 10 MiB)
    LOG_LEVEL            — Root log level name (default: INFO)
    LOG_DIR              — If set, logs are also written to a daily file in this directory

Output Buffer Philosophy:
    RUBOCOP_MAX_BUFFER caps how much stdout/stderr a single RuboCop run may
    produce. A run that exceeds the cap is killed and reported as an
    execution failure rather than being truncated, because a truncated JSON
    report cannot be parsed anyway.
"""
import os
from dotenv import load_dotenv

load_dotenv()

RUBOCOP_COMMAND = os.getenv("RUBOCOP_COMMAND", "rubocop")
RUBOCOP_MAX_BUFFER = int(os.getenv("RUBOCOP_MAX_BUFFER", 10 * 1024 * 1024))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR")
