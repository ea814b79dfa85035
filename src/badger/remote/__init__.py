from .remote_client import (
    MIN_AUTHENTICATED_RESPONSE_BYTES,
    BggMicrobadgeClient,
    RemoteAssignmentService,
    ensure_authenticated,
)

__all__ = [
    "MIN_AUTHENTICATED_RESPONSE_BYTES",
    "BggMicrobadgeClient",
    "RemoteAssignmentService",
    "ensure_authenticated",
]
