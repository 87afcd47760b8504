"""Root conftest: shared test configuration."""

import os

# Ensure tests don't accidentally use a real API key
os.environ.setdefault("ATTIO_API_KEY", "attio-test-fake-key")
