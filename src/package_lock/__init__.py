"""
Package Lock - Package metadata records for a dependency-automation lock.

Models the per-package entries of the automation lock and converts them to
and from the flat lock representation.
"""

__version__ = "1.0.0"


def __getattr__(name: str):
    """Lazy import of the public classes."""
    if name == "PackageRecord":
        from package_lock.models.package import PackageRecord

        return PackageRecord
    if name == "LockRegistry":
        from package_lock.core.registry import LockRegistry

        return LockRegistry
    if name == "UnexpectedValueError":
        from package_lock.core.exceptions import UnexpectedValueError

        return UnexpectedValueError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["PackageRecord", "LockRegistry", "UnexpectedValueError", "__version__"]
