"""Hardware and system information read from Linux procfs and sysfs, with a plain-text report."""

__version__ = "0.1.0"
__all__ = ["__version__"]