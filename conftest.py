"""Global pytest configuration."""

import os

# Never reach a real model from tests; set before backend.app.main is imported
os.environ.setdefault("LLM_PROVIDER", "stub")
