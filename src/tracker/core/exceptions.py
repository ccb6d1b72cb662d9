"""Domain exceptions.

Database errors (``sqlalchemy.exc.IntegrityError`` for missing projects,
foreign key and check constraint violations) are not wrapped here; they reach
the caller unchanged.
"""


class NotFoundError(LookupError):
    """Raised when a lookup by primary key matches no row."""

    def __init__(self, entity: str, entity_id: object):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
