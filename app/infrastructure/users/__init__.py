"""
Infrastructure adapters for the users bounded context.

Each adapter implements the UserRepository port.
"""
