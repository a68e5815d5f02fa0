"""
Pydantic schema definitions for API payloads.

Each entity (backlogs, stories, subtasks) defines its own request and
response models.  Schemas are kept apart from the stored records in
``models`` so that the API representation is decoupled from storage.
"""
