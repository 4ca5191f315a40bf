"""Base model for scoring domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for scoring domain models.

    Models are immutable: changes are made with ``model_copy(update=...)``
    and written back through a repository. Unknown fields are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @staticmethod
    def canonical_id(value: object) -> str:
        """Canonical string form of an identifier (str, UUID, ObjectId...)."""
        return str(value)
