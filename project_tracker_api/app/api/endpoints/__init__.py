"""
Endpoint modules of the API.

Each module defines an ``APIRouter`` for one entity.  The routers are
aggregated in ``api/router.py`` and mounted by the application
factory.
"""
