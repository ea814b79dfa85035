from .selection_state import BadgeState, compute_selection, submission_from_snapshot

__all__ = ["BadgeState", "compute_selection", "submission_from_snapshot"]
