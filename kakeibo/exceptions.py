"""Custom exceptions for Kakeibo."""


class LedgerError(Exception):
    """Base exception for ledger errors."""


class InputContractError(LedgerError):
    """Raised when an entry collection is structurally invalid (e.g. a null item)."""

    def __init__(self, index: int, message: str):
        self.index = index
        super().__init__(f"Input contract violation at entry {index}: {message}")


class ExportFormatError(LedgerError):
    """Raised when an exported document cannot be read back."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        location = f" (line {line})" if line is not None else ""
        super().__init__(f"Export format error{location}: {message}")


class LedgerServiceError(LedgerError):
    """Raised when the remote ledger service rejects or fails a request."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        prefix = f"HTTP {status_code}: " if status_code is not None else ""
        super().__init__(f"Ledger service error: {prefix}{message}")


class AuthenticationError(LedgerServiceError):
    """Raised when the service refuses the session (401/403)."""
