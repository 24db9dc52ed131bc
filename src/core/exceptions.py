"""Custom exceptions shared by all layers of the client."""


class ChessClientError(Exception):
    """Top-level exception. Catch this one to handle anything raised by the client."""


class InvalidSquareError(ChessClientError, ValueError):
    """Square label, offset or (x, y) pair outside the board. This is a programming error, not a runtime condition."""


class PayloadError(ChessClientError):
    """Data received from the backend could not be interpreted."""


class BackendError(ChessClientError):
    """A call to the backend did not succeed."""


class BackendUnavailableError(BackendError):
    """The backend could not be reached (connection refused, timeout, dropped stream...)"""


class CommandRejectedError(BackendError):
    """The backend answered, but refused the command (ex. illegal move, invalid FEN)."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"Backend rejected the command ({status_code}): {detail}")
        self.status_code = status_code
        self.detail = detail
