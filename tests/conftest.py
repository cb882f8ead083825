"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import os
import sys
from pathlib import Path

# Point the application at an in-memory database before anything imports settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["WEEKDAY_LOCALE"] = "de"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
