"""Pytest configuration and fixtures shared across all test modules.

This file is automatically loaded by pytest before running any tests.
Environment variables are set before anything imports
``lengthlimit.core.config`` so the global settings pick them up.
"""

import os

# CRITICAL: Set this before any imports that might load settings
os.environ["LENGTHLIMIT_ENV"] = "testing"

os.environ.setdefault("LIMIT_MAX_UPLOAD_SIZE_MB", "1")
os.environ.setdefault("LIMIT_MAX_REQUEST_BODY_BYTES", "64")
os.environ.setdefault("LIMIT_READ_CHUNK_SIZE", "16")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
