"""Badge catalog and category index."""

from .catalog_models import SLOT_COUNT, SLOT_IDS, UNCATEGORIZED, Badge
from .catalog_service import Catalog, derive_categories

__all__ = ["Badge", "Catalog", "SLOT_COUNT", "SLOT_IDS", "UNCATEGORIZED", "derive_categories"]
