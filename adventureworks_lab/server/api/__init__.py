"""
API routers.

- adventure_works: the AdventureWorks demo controllers
- controller: the controller routing convention
- v1: versioned endpoints (health, practice)
"""
