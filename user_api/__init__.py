"""
User REST API
=============

CRUD HTTP service over a single User collection in MongoDB.
"""

__version__ = "1.0.0"
