from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class UnknownNetworkError(DomainError):
    """Chain family, network or token is not in the registry."""


class ProtocolConfigError(DomainError):
    """Protocol configuration references something that does not exist."""


class PendleApiError(DomainError):
    PREFIX = "Pendle API error"

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(f"{self.PREFIX}: {message}")
        self.message = message
        self.status_code = status_code


class MarketPaginationLimitError(PendleApiError):
    """Market listing did not reach an empty page within max_pages."""

    def __init__(self, *, max_pages: int, fetched: int):
        super().__init__(
            f"market pagination exceeded max_pages={max_pages} (fetched={fetched})"
        )
        self.max_pages = max_pages
        self.fetched = fetched
