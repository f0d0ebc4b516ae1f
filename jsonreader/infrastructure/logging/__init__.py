# jsonreader/infrastructure/logging/__init__.py

"""Logging infrastructure for jsonreader.

This module provides centralized logging configuration and setup.
"""

# Local imports
from jsonreader.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging"]
