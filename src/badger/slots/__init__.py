from .slot_table import SlotTable
from .slots_models import Slot

__all__ = ["Slot", "SlotTable"]
