"""
API package containing the HTTP routes and their dependencies.

``router`` in ``api/router.py`` includes every resource router and is
mounted by ``create_app``.
"""
