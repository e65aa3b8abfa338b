from core.scheduler import Scheduler
from core.tracker import Reconciliation, TrackedState, reconcile

__all__ = ["Reconciliation", "Scheduler", "TrackedState", "reconcile"]
