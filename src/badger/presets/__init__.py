from .preset_rotation import PresetRotationScheduler

__all__ = ["PresetRotationScheduler"]
