"""
Custom Exceptions

Application-specific exception classes for better error handling
and more informative error messages.

Only EmptyQueryError, ExportError and AggregationFailure are meant to
reach the user. AdapterFailure and its subclasses are raised inside a
single source adapter and absorbed there.
"""


class ScholarSearchError(Exception):
    """Base exception for all application errors."""
    pass


# === Query Errors ===

class EmptyQueryError(ScholarSearchError):
    """User submitted no usable search term."""
    def __init__(self, message: str = "Please enter a search query"):
        self.message = message
        super().__init__(message)


# === Source Adapter Errors ===

class AdapterFailure(ScholarSearchError):
    """Base exception for failures inside one source adapter."""
    def __init__(self, source_name: str, message: str):
        self.source_name = source_name
        self.message = message
        super().__init__(f"{source_name}: {message}")


class AdapterTimeoutError(AdapterFailure):
    """Source adapter did not finish in time."""
    def __init__(self, source_name: str, timeout_seconds: float):
        super().__init__(source_name, f"Request timed out after {timeout_seconds}s")
        self.timeout_seconds = timeout_seconds


class AdapterHTTPError(AdapterFailure):
    """Source API returned an HTTP error status."""
    def __init__(self, source_name: str, status_code: int, detail: str = None):
        msg = f"HTTP {status_code}"
        if detail:
            msg += f": {detail}"
        super().__init__(source_name, msg)
        self.status_code = status_code


class AdapterParseError(AdapterFailure):
    """Failed to parse response from a source API."""
    def __init__(self, source_name: str, detail: str = None):
        msg = "Failed to parse response"
        if detail:
            msg += f": {detail}"
        super().__init__(source_name, msg)


# === Aggregation Errors ===

class AggregationFailure(ScholarSearchError):
    """Unexpected failure in the shared merge/dedup/truncate step."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Aggregation failed: {message}")


# === Export Errors ===

class ExportError(ScholarSearchError):
    """Nothing to export, or the export could not be produced."""
    def __init__(self, message: str = "No results to export"):
        self.message = message
        super().__init__(message)

