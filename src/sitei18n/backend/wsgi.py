"""WSGI entrypoint for serving the localisation API behind a process manager."""

from sitei18n.backend.app import create_app

application = create_app()
