import sys
from pathlib import Path

import pytest

# Ensure the 'src' directory is on sys.path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def mock_leaf_hashes():
    """Hashes of the deterministic mock leaves for seeds 0..n-1."""
    from merkle_core.crypto import sha256_hex
    from merkle_core.mock import create_leaf

    def _make(n):
        return [sha256_hex(create_leaf(i).to_bytes()) for i in range(n)]

    return _make
