"""Helpers for byte order, dates, hex dumps, file system access and thread-based tasks."""

__version__ = "0.1.0"
__all__ = ["date_time", "debug", "endian", "filesystem", "rtos"]