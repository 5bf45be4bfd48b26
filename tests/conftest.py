import os
from pathlib import Path

# Dynamically ensure the src/ tree is importable without an install
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in os.sys.path:
    os.sys.path.insert(0, str(SRC_ROOT))
