"""
WSGI compatibility layer.

Wraps the ASGI application for WSGI servers such as Gunicorn or Waitress.
Prefer ASGI deployment (``python -m app``) when possible.
"""

from a2wsgi import ASGIMiddleware

from app.main import app

application = ASGIMiddleware(app)
