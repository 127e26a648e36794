"""
Exception types raised by SortBench
"""


class SortBenchError(Exception):
    """Base class for SortBench errors"""


class DatasetLoadError(SortBenchError, OSError):
    """A dataset file could not be opened"""

    def __init__(self, path, reason: str | None = None):
        self.path = str(path)
        self.reason = reason
        message = f"Could not open file {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DatasetFormatError(SortBenchError, ValueError):
    """A dataset file holds a line that is not UTF-8 text or a token that is not an integer"""

    def __init__(self, path, line_number: int, token: str, reason: str = "not an integer"):
        self.path = str(path)
        self.line_number = line_number
        self.token = token
        super().__init__(f"{self.path}:{line_number}: {reason}: {token!r}")


class SortVerificationError(SortBenchError):
    """A sort function left its input out of order"""

    def __init__(self, algorithm: str, index: int):
        self.algorithm = algorithm
        self.index = index
        super().__init__(f"{algorithm} left elements {index} and {index + 1} out of order")
