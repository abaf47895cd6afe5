"""Exception hierarchy for goexphash.

Every failure is terminal: there is no partial fingerprint, so callers only
need to catch :class:`GoExpHashError`.
"""

__all__ = [
    "GoExpHashError",
    "ConfigurationError",
    "ResolutionError",
    "FetchError",
    "ParseError",
]


class GoExpHashError(Exception):
    """Base class for all goexphash errors."""


class ConfigurationError(GoExpHashError):
    """Raised when required environment or workspace configuration is missing."""


class ResolutionError(GoExpHashError):
    """Raised when a package directory cannot be located."""


class FetchError(GoExpHashError):
    """Raised when the remote fetch collaborator fails."""


class ParseError(GoExpHashError):
    """Raised when Go source cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        """Initialize parse error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        line : int | None, optional
            1-based line of the first syntax error, if known.
        """
        super().__init__(message)
        self.file = file
        self.line = line
