"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from typing import Dict, Any

import structlog


PROFILES_YAML = """\
profiles:
  euro:
    currency:
      default_code: EUR
      default_locale: de_DE
    formatting:
      abbreviate_precision: 2
  binary:
    formatting:
      binary_sizes: true
      file_size_precision: 2
  broken:
    random:
      otp_digits: 0
"""


@pytest.fixture
def profiles_dir(tmp_path: Path) -> Path:
    """Config directory holding a profiles.yaml with euro, binary and broken profiles."""
    (tmp_path / "profiles.yaml").write_text(PROFILES_YAML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def sample_overrides() -> Dict[str, Any]:
    """Call-site configuration overrides for testing."""
    return {
        "formatting": {
            "strip_trailing_zeros": True,
            "percentage_decimals": 1,
        },
        "currency": {
            "symbols": {"BTC": "₿"},
        },
    }


@pytest.fixture
def captured_logs():
    """Capture structlog events emitted during a test."""
    with structlog.testing.capture_logs() as logs:
        yield logs
