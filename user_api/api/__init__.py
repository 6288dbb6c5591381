"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers
- Errors: translation of failures into {message, error} JSON bodies
- Dependencies: Dependency injection setup
"""
