"""tools/smoke_test.py runs clean from the repo root."""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def test_smoke_tool_main():
    from tools import smoke_test

    assert smoke_test.main() == 0
