"""Exception types raised inside the workbench.

Collaborator failures (queries, transforms, network calls) are caught at the
tool boundary and converted into error-shaped values; these exceptions carry
the message across that boundary.
"""


class WorkbenchError(ValueError):
    """Base class for workbench errors."""


class QueryError(WorkbenchError):
    """A query expression could not be compiled or evaluated."""


class TransformError(WorkbenchError):
    """A transform expression was rejected or failed to evaluate."""


class ConfigError(WorkbenchError):
    """A configuration file is malformed."""
