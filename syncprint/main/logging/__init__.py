"""
Logging - loguru diagnostics for the syncprint library.
"""

from ._diagnostics import enable_logging, disable_logging, NAMESPACE

__all__ = ["enable_logging", "disable_logging", "NAMESPACE"]
