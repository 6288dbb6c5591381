"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: one class per user operation (create, get, list, update, delete)
- Services: UserService, which composes the use cases
- DTO: Pydantic response models
"""
