class DomainError(Exception):
    """Base for errors a router turns into an HTTP response."""

    detail = "error"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.detail)
        self.detail = detail or self.detail


class NotFoundError(DomainError):
    detail = "not_found"


class ConflictError(DomainError):
    detail = "conflict"


class UnsupportedUrlError(DomainError):
    detail = "unsupported_url"
