"""Concrete adapters for backends, caller resolution, and diagnostics."""

from __future__ import annotations

from .caller import FrameCallerResolver, NullCallerResolver
from .diagnostic import RichDiagnosticSink
from .stdlib_backend import StdlibBackendChannel, StdlibBackendProvider

__all__ = [
    "FrameCallerResolver",
    "NullCallerResolver",
    "RichDiagnosticSink",
    "StdlibBackendChannel",
    "StdlibBackendProvider",
]
