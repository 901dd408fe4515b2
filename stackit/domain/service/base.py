"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span several entities,
    such as keeping vote counts in line with the vote ledger.
    """

    pass
