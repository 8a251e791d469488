"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from sales.core.enums import ErrorCode, Environment
"""

from sales.core.enums.environment import Environment
from sales.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
