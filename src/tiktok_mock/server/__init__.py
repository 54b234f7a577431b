"""Mock creative report HTTP server."""

from .app import create_app, main, run_server

__all__ = ['create_app', 'main', 'run_server']
