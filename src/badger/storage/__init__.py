from .snapshot_store import CURRENT_SELECTION, PRESET_PREFIX, SNAPSHOT_SUFFIX, SnapshotStore

__all__ = ["CURRENT_SELECTION", "PRESET_PREFIX", "SNAPSHOT_SUFFIX", "SnapshotStore"]
