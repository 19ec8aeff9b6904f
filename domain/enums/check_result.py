"""Pass/fail tag of a single check."""
from enum import Enum


class CheckResult(str, Enum):
    PASSED = "Passed"
    FAILED = "Failed"
