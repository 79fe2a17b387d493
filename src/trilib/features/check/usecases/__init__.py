"""Use cases of the library check."""

from .check_runner import CheckRunner
from .dap_content import DapContentResolver
from .data_match import DataMatchResolver
from .events import CheckEvent
from .existence import ExistenceResolver
from .issue_scan import IssueScanner

__all__ = [
    "CheckEvent",
    "CheckRunner",
    "DapContentResolver",
    "DataMatchResolver",
    "ExistenceResolver",
    "IssueScanner",
]
