# tests/conftest.py
import os
import sys
from datetime import datetime, timezone

import pytest

# so `import lambdas...` works when running from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from lambdas.dashboard.storage import FlagStore, InMemoryFlagStore, StoreUnavailable


@pytest.fixture(autouse=True)
def aws_env(monkeypatch):
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")


@pytest.fixture()
def flag_store():
    return InMemoryFlagStore()


@pytest.fixture()
def failing_store():
    class BrokenStore(FlagStore):
        def get_flag(self, key):
            raise StoreUnavailable("ssm is down")
    return BrokenStore()


@pytest.fixture()
def frozen_now():
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
