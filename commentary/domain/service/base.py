"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the comment rules that span repositories: existence
    checks, moderation defaults and view assembly.
    """

    pass
