"""Base service class for domain services."""

from sqlalchemy.exc import IntegrityError

from hunt.domain.repository.constraints import ALL_CONSTRAINTS


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def violated_constraint(error: IntegrityError) -> str | None:
    """Return the name of the known constraint an integrity error reports.

    Args:
        error: Error raised by the store on insert or update

    Returns:
        Constraint name, or None if the error names none we know about
    """
    message = str(error.orig)
    return next((name for name in ALL_CONSTRAINTS if name in message), None)
