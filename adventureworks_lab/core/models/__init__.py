"""
Shared models.

- io: API request/response schemas
"""
