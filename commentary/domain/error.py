"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class MalformedTreeError(DomainError):
    """Raised when comments cannot be reached from the virtual root.

    Happens for orphans (parent missing) and for reply cycles.
    """

    def __init__(self, unreachable_ids: list[int]):
        self.unreachable_ids = unreachable_ids
        super().__init__(
            f"{len(unreachable_ids)} comment(s) unreachable from root: {unreachable_ids}"
        )
