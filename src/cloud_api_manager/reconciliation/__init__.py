"""Reconciliation domain exports."""

from .reconciliation_contracts import (
    OperationFailedError,
    ReconciliationOutcome,
    ReconciliationRequest,
)
from .reconciliation_controller import CloudApiManagerController

__all__ = [
    "CloudApiManagerController",
    "OperationFailedError",
    "ReconciliationOutcome",
    "ReconciliationRequest",
]
