"""
WSGI entry point for the articles API.

Exposes `application` for WSGI-only hosts (Gunicorn sync workers,
Waitress, mod_wsgi). ASGI deployment via `app.main:app` is preferred.
"""

from asgiref.wsgi import AsgiToWsgi

from app.main import app

application = AsgiToWsgi(app)
