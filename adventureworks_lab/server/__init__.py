"""
AdventureWorks-Lab Server Package.

This package contains the web server implementation for AdventureWorks-Lab.

Subpackages:
    api: FastAPI route definitions (AdventureWorks controllers, practice API, health).
    core: Configuration and constants.
    exception_handlers: Global exception handling.
"""
