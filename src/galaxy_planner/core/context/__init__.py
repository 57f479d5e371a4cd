# src/galaxy_planner/core/context/__init__.py
"""
Context e FileInspector do Galaxy Planner.

- context   → `Context` e `ReleaseFile`
- inspector → `inspect_dir`, descoberta não recursiva por extensão
"""

from .context import Context, ReleaseFile
from .inspector import inspect_dir

__all__ = ["Context", "ReleaseFile", "inspect_dir"]
