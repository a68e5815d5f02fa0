"""
HTTP layer of the Project Tracker API.

``router.py`` aggregates the per‑entity routers found in
``endpoints``.  Handlers are thin: they parse the request, call one
``ProjectStore`` operation and wrap the result in the response
envelope.  Error mapping lives in ``main``.
"""
