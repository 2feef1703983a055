"""Shared fixtures for cloudsecure_config tests."""

import io
import json
import logging
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cloudsecure_config.utils.interactive import Prompter


@pytest.fixture
def temp_dir():
    """Creates a temporary directory for test operations."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def config_path(temp_dir):
    """Path to a configuration file that does not exist yet."""
    return temp_dir / "config.json"


@pytest.fixture
def make_prompter():
    """Factory for a prompter fed with the given answer lines.

    The returned prompter exposes its output buffer as ``prompter.output``.
    """
    def _make(*lines: str) -> Prompter:
        text = "".join(line + "\n" for line in lines)
        return Prompter(input_stream=io.StringIO(text), output_stream=io.StringIO())
    return _make


@pytest.fixture
def write_config(config_path):
    """Writes a dict (or raw text) to the config path and returns the path."""
    def _write(data) -> Path:
        if isinstance(data, str):
            config_path.write_text(data, encoding="utf-8")
        else:
            config_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return config_path
    return _write


@pytest.fixture
def sample_data():
    """A complete two-profile configuration in on-disk form."""
    return {
        "cloudsecures": {
            "prod": {"apiKey": "pk", "apiSecret": "ps", "tenantID": "pt"},
            "backup": {"apiKey": "bk", "apiSecret": "bs", "tenantID": "bt"},
        },
        "default_cloud_name": "prod",
    }


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers installed by setup_logging so they don't outlive a CLI run."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
    for handler in before:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
