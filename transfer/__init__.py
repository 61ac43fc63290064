"""
Data transfer module
CSV import/export and backups
"""

from .import_export import ImportExportService

__all__ = ['ImportExportService']
