"""
Shared error handling package.

Translates users domain errors and request validation failures
into the API's JSON error body.
"""
