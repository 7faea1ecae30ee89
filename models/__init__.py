"""
Models package - Data classes for the application.
"""

from models.target import CheckTarget
from models.check_result import CheckResult, LintMessage
from models.report import SyntaxReport, ReportBlock

__all__ = ['CheckTarget', 'CheckResult', 'LintMessage', 'SyntaxReport', 'ReportBlock']
