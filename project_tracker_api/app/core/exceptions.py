"""
Domain exceptions raised by the service layer.

Services signal a missing entity with ``NotFoundError``.  It derives
from ``ValueError`` so existing ``except ValueError`` handlers keep
working; the application registers a dedicated handler that turns it
into a 404 response.
"""


class NotFoundError(ValueError):
    """A referenced backlog, story or subtask does not exist."""

    def __init__(self, entity: str, entity_id: str | None = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
