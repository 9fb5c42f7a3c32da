"""Root conftest: keeps the repo root importable when running pytest from a checkout."""
