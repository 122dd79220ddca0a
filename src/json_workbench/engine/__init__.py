"""Engine module - diffing and session rendering.

The Diff Engine compares two raw inputs; the Workbench renders a session's
input in any output mode.
"""

from json_workbench.engine.diff_engine import DiffEngine, DiffMode, DiffResult, DiffSegment, diff
from json_workbench.engine.workbench import (
    OutputMode,
    Workbench,
    WorkbenchOutput,
    WorkbenchSession,
    render_diff,
)

__all__ = [
    "DiffEngine",
    "DiffMode",
    "DiffResult",
    "DiffSegment",
    "diff",
    "OutputMode",
    "Workbench",
    "WorkbenchOutput",
    "WorkbenchSession",
    "render_diff",
]
