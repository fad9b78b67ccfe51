# Path: benchutil/errors.py
"""
Report Errors

Failure kinds raised while rendering a report. Nothing here is retried;
a render that raises leaves its sink with incomplete output.

    ReportError
      EmptyInputError       render called with zero records
      SinkWriteError        output sink rejected a write
      CollaboratorError     an external stage failed
        MarkdownTransformError
        SystemInfoError
"""


class ReportError(Exception):
    """Base class for report rendering failures."""


class EmptyInputError(ReportError, ValueError):
    """Raised when a renderer is given no records."""

    def __init__(self, renderer: str = 'report'):
        super().__init__(f"{renderer}: nothing to render, record set is empty")
        self.renderer = renderer


class SinkWriteError(ReportError):
    """Raised when the output sink fails; the original error is chained."""


class CollaboratorError(ReportError):
    """Raised when an external collaborator returns an error."""


class MarkdownTransformError(CollaboratorError):
    """Raised when the CSV to Markdown stage cannot parse its input."""


class SystemInfoError(CollaboratorError):
    """Raised when a platform probe fails."""


__all__ = [
    'ReportError',
    'EmptyInputError',
    'SinkWriteError',
    'CollaboratorError',
    'MarkdownTransformError',
    'SystemInfoError',
]
