"""Exceptions raised by the sales report pipeline.

Every error is fatal to the call that raised it: the pipeline never returns a
partial report.
"""


class SalesReportError(Exception):
    """Base class for all report pipeline failures."""


class InvalidDataError(SalesReportError, ValueError):
    """The dataset is missing, or one of its collections is absent, empty or malformed."""


class InvalidOptionsError(SalesReportError, ValueError):
    """A revenue or bonus strategy is missing or not callable."""


class ReferentialIntegrityError(SalesReportError, LookupError):
    """A purchase record points at a seller or product that is not in the dataset."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"Unknown {kind} '{key}' referenced by purchase records")
