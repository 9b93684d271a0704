"""
Shared testing utilities for Lumière components.

Provides standardized test structure:
- LaborantTest: Base class for all tests
- Test result models

All tests MUST inherit from LaborantTest.
"""

from shared.tests.models import IndividualTestResult, TestFileResult, TestStatus
from shared.tests.test_base import LaborantTest

__all__ = [
    "LaborantTest",
    "TestStatus",
    "IndividualTestResult",
    "TestFileResult",
]
