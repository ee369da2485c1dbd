"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities handled by entitykit.

    Entities stay mutable: pre/post-process hooks edit them in place and
    data services write the assigned id back onto the instance. Assignments
    are still validated.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,  # Allow custom value objects
    )
