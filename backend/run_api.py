#!/usr/bin/env python3
"""
Start the Wind Lab API with auto-reload.

Usage:
    python run_api.py
"""

import logging

import uvicorn

from config.settings import API_HOST, API_PORT, LOGGING_CONFIG

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logging.basicConfig(**LOGGING_CONFIG)
    logger.info(f"Wind Lab API on http://localhost:{API_PORT} (docs at /docs)")

    # reload needs the app as an import string
    uvicorn.run("api.main:app", host=API_HOST, port=API_PORT, reload=True)
