"""
Service layer abstraction.

``ProjectStore`` encapsulates all state and business rules.  Request
handlers call exactly one store operation each, so the store could be
swapped for a database‑backed implementation without touching the API
handlers.
"""
