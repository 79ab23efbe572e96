"""
Domain layer for the users bounded context.

Holds the User entity, the storage port and the context's errors.
No framework imports allowed.
"""
