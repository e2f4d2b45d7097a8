"""
FastAPI RESTful API for an in-memory book collection.

This package provides:
- Book listing with an optional category filter
- Book lookup, creation, update and deletion by id
- A uniform error body for not-found and invalid requests
"""
