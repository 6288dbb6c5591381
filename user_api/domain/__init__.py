"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on web frameworks or database drivers.

Contains:
- Models: the User record and its field rules
- Repository Interfaces: Abstract contracts for data access
- Exceptions: errors raised by validation and lookups
"""
