"""
FastAPI routers for all API endpoints.

Each module defines a router for one table-backed resource (parts, cart,
users, verification codes) plus the public health check.
"""
