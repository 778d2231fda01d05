from __future__ import annotations


class FarmTokenError(Exception):
    """Base class for errors reported back to API callers.

    `kind` is the machine-readable tag, `detail` the human-readable message.
    """

    kind = "error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ValidationError(FarmTokenError):
    kind = "validation_error"


class NotFoundError(FarmTokenError):
    kind = "not_found"


class TokenisationError(FarmTokenError):
    """The ledger gateway call failed or timed out.

    The registry is left untouched, so the caller may retry. A failed attempt
    does not prove that nothing was created on the ledger.
    """

    kind = "tokenisation_error"

    def __init__(self, detail: str, *, cause: BaseException | None = None) -> None:
        super().__init__(detail)
        self.cause = cause
