"""
Reporting module
Summary reports over stored records
"""

from .report_generator import ReportGenerator

__all__ = ['ReportGenerator']
