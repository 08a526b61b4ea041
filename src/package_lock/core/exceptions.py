"""
Error types shared by the lock components.

Record lookups never raise; these are for code that checks persisted data
before handing it to a record.
"""


class PackageLockError(Exception):
    """Base error for package-lock."""

    kind: str = "Unknown"


class UnexpectedValueError(PackageLockError, ValueError):
    """A value did not match the expected shape or domain."""

    kind = "UnexpectedValue"
