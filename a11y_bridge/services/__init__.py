"""Scan orchestration services."""

from .scan_service import ScanService, clean_html

__all__ = ["ScanService", "clean_html"]
