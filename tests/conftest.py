"""Root conftest — shared test configuration."""

import os

# Keep the import-time app in heartbeat.main independent of the caller's shell
os.environ.setdefault("PORT", "3000")
os.environ.setdefault("LOG_FORMAT", "json")
