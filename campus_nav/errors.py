# -*- coding: utf-8 -*-
"""Error handling for the campus_nav library.

Malformed input never aborts a parse: the parser records a
``FeatureParseIssue`` and moves on to the next feature. Exceptions are
reserved for misuse of the API (mutating a frozen graph, unparseable
coordinates handed to the command line tools).
"""

from dataclasses import dataclass

from campus_nav.enums import Severity


@dataclass(frozen=True)
class FeatureLocation:
    """Tracks which feature of which document an issue refers to.

    Attributes:
        source: The source file name or identifier
        index: Position of the feature in the ``features`` array (0-based),
            or None when the issue concerns the whole document
    """

    source: str
    index: int | None = None

    def __str__(self) -> str:
        """Format as human-readable location string."""
        if self.index is None:
            return f"(in {self.source})"
        return f"(in {self.source}, feature {self.index})"


@dataclass(frozen=True)
class FeatureParseIssue:
    """Represents a parsing error or warning with its location.

    This is a data record for storing issue information, not an exception.

    Attributes:
        severity: ERROR or WARNING
        message: Human-readable message
        location: Where the issue occurred (optional)
    """

    severity: Severity
    message: str
    location: FeatureLocation | None = None

    def __str__(self) -> str:
        """Format as human-readable issue string."""
        base = f"{self.severity.value}: {self.message}"
        if self.location:
            base += f" {self.location}"
        return base


class CampusNavException(Exception):  # noqa: N818
    """Base class for exceptions raised by campus_nav."""


class GraphFrozenError(CampusNavException):
    """Raised when a routing graph is mutated after construction."""


class InvalidCoordinateError(CampusNavException, ValueError):
    """Raised when a coordinate cannot be parsed or is out of range."""
