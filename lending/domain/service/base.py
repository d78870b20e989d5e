"""Base class for domain services."""

from collections.abc import Collection, Mapping
from typing import Any

from lending.domain.error import ValidationError


class Service:
    """Base class for domain services.

    Services hold the business rules of the lending workflow and talk to
    storage only through repository interfaces.
    """

    pass


def check_changes(
    resource: str,
    changes: Mapping[str, Any],
    updatable: Collection[str],
    nullable: Collection[str] = (),
    required_text: Collection[str] = (),
) -> None:
    """Validate the fields of a partial update.

    Only the fields present in ``changes`` are checked. None means "clear",
    which is allowed for ``nullable`` fields only.

    Args:
        resource: Name used in error messages
        changes: Field values to apply
        updatable: Fields that may be changed
        nullable: Fields that may be set back to None
        required_text: Fields that must not be blank

    Raises:
        ValidationError: On an unknown field, a None for a non-nullable
            field, or a blank required text field
    """
    unknown = sorted(set(changes) - set(updatable))
    if unknown:
        raise ValidationError(f"Unknown {resource} fields: {', '.join(unknown)}")
    for field, value in changes.items():
        if value is None:
            if field not in nullable:
                raise ValidationError(f"{resource} {field} cannot be cleared")
        elif field in required_text and not value.strip():
            raise ValidationError(f"{resource} {field} cannot be blank")
