"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one resource.
Paths inside a module are relative; the routers are mounted under
their ``/api/...`` prefixes in ``api/router.py``.
"""
