"""Error taxonomy for the arrivals intake pipeline."""


class ZookeeperError(Exception):
    """Base class for all intake pipeline errors."""


class SourceUnavailableError(ZookeeperError):
    """An input file could not be opened for reading."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Could not open {path} for reading"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DestinationUnavailableError(ZookeeperError):
    """The report destination could not be opened for writing."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Could not open {path} for writing"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedNumericFieldError(ZookeeperError, ValueError):
    """A line matched the arrival pattern but a numeric field did not parse."""

    def __init__(self, field: str, value: str, line: str):
        self.field = field
        self.value = value
        self.line = line
        super().__init__(f"Malformed {field} '{value}' in line: {line!r}")
