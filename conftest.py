"""
Root conftest - shared pytest configuration.
Ensures user_service is importable when running pytest from the project root
without an editable install.
"""
import sys
from pathlib import Path

_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
