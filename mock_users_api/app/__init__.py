"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``api`` holds the routes and their dependencies, ``core``
the configuration, logging, validation and error handling, ``schemas``
the payload models and rule sets, and ``services`` the in-memory
stores.
"""

from .main import app, create_app  # noqa: F401
