from __future__ import annotations

import os
import tempfile
from pathlib import Path


TEST_STATE_DIR = Path(tempfile.gettempdir()) / "badgerotor-tests"

os.environ.setdefault("BADGER_STATE_DIR", str(TEST_STATE_DIR))
os.environ.setdefault("BADGER_DISABLE_BACKGROUND", "1")
