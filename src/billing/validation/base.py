"""Protocol for entity validation. Implement to add rules for another entity type."""

from typing import Any, Optional, Protocol

from billing.validation.errors import Errors


class EntityValidator(Protocol):
    """Validate one host entity and record rejected fields in an Errors collection."""

    def supports(self, entity_type: type) -> bool:
        """True if this validator handles instances of entity_type."""
        ...

    def validate(self, target: Any, errors: Optional[Errors] = None) -> Errors:
        """
        Record every rule violation of target into errors (a new collection
        when None) and return it. Raise ValueError if target is None.
        """
        ...
