"""
Infrastructure Layer
====================

Concrete implementations of domain repository interfaces.

Contains:
- db: MongoDB connection and repository (pymongo)
- memory: in-memory repository for local runs and tests
"""
