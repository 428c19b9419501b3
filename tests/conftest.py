import sys, os

# Ensure src and the repository root are on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

from tests.helpers import make_engine, run_until_completed

__all__ = [
    "make_engine",
    "run_until_completed",
]
