"""Operation result types and status enums.

Standardized result types for service-layer operations, including the
status enum, the result dataclass, and the PagerDuty error classifier.
"""

from infrastructure.operations.classifiers import classify_pagerduty_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_pagerduty_error",
]
