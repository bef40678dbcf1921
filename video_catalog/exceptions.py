"""
Custom exception hierarchy for the video catalog.

Per-file problems (unreadable entries, probe failures, junk metadata) never
raise; they degrade the affected field to "Unknown". The exceptions below cover
the conditions that do stop a scan or an export.
"""


class VideoCatalogError(Exception):
    """Base exception for all video catalog errors."""
    pass


class ScanRootError(VideoCatalogError):
    """Raised when the scan root is missing or not a directory."""
    pass


class ScanCancelledError(VideoCatalogError):
    """Raised when a scan is aborted before the catalog is complete."""
    pass


class ProbeError(VideoCatalogError):
    """Raised when ffprobe cannot be run or returns an error."""
    pass


class ExportError(VideoCatalogError):
    """Raised when the CSV export cannot be written."""
    pass
