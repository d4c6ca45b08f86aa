"""
Core utilities and configuration for AdventureWorks-Lab.

This package provides core functionality including logging configuration,
database setup, and the ORM entities and repositories shared by the server.
"""

from adventureworks_lab.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
