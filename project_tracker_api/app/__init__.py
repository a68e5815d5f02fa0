"""
Application package initializer.

The project is organised into logical pieces:

* ``models`` – stored entity records and the ``Status`` enumeration;
* ``services`` – the concurrent in‑memory store, status transition
  rules and dashboard aggregation;
* ``schemas`` – pydantic request/response models and the envelope;
* ``api`` – FastAPI routers, one module per entity;
* ``core`` – configuration, logging, the readers/writer lock and
  domain exceptions.
"""

from .main import app, create_app  # noqa: F401
