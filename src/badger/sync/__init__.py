from .randomizer import RandomizeService, SyncOutcome, pick_random_badges

__all__ = ["RandomizeService", "SyncOutcome", "pick_random_badges"]
