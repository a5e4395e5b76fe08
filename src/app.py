"""Notifier FastAPI application.

Serves the storefront's notification inbox and preference endpoints.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay of domain.toml is applied.
from notifier.api.application import create_app
from notifier.domain import notifier
from notifier.utils.logging import configure_logging

configure_logging()
notifier.init()

app = create_app()
