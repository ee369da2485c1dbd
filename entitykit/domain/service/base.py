"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold orchestration and validation logic and delegate
    storage to an injected data service. They own no state of their own.
    """

    pass
