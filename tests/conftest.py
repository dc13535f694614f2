import sys
from pathlib import Path

import pytest

# Ensure `contractor_directory` is importable when running pytest from the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contractor_directory.core import config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("WORDPRESS_API_URL", "WORDPRESS_TIMEOUT", "CONTRACTORS_PAGE_SIZE", "PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()
