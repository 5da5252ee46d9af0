"""
Top-level package for the Mock Users API.

All functionality lives in the ``app`` subpackage; import the
application as ``mock_users_api.app.main.app``.
"""

__all__ = []
