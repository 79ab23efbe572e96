"""
Interface layer for the users bounded context.

FastAPI router, request/response schemas and dependency providers.
"""
