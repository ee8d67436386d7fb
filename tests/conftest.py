"""
Shared test fixtures and configuration.
"""

import logging
import os
import sys

import pytest

# Add the parent directory to the path so we can import the raph package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from raph.utils.settings import Settings

SAMPLE_CONFIG = """\
[default]
region = us-east-1

[profile dev]
region = eu-west-1
output = json

[profile prod]
sso_session = corp
sso_account_id = 123456789012

[sso-session corp]
sso_start_url = https://corp.awsapps.com/start
"""


@pytest.fixture(autouse=True)
def reset_raph_logger():
    """Undo any handler setup done by the CLI so caplog sees records."""
    yield
    logger = logging.getLogger("raph")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_home(tmp_path):
    """A home directory with an empty ``.aws`` folder."""
    (tmp_path / ".aws").mkdir()
    return tmp_path


@pytest.fixture
def write_config(fake_home):
    """Write ``~/.aws/config`` in the fake home."""
    def _write(content):
        path = fake_home / ".aws" / "config"
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def configured_home(fake_home, write_config):
    """A fake home whose AWS config declares ``dev`` and ``prod``."""
    write_config(SAMPLE_CONFIG)
    return fake_home


@pytest.fixture
def settings(configured_home):
    """Settings pointing at the configured fake home, no active profile."""
    return Settings(home=configured_home)
