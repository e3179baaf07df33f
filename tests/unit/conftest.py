"""Fixtures for unit tests."""

from datetime import datetime

import pytest

from bru_report.models.report import RunReport
from bru_report.testing import payloads
from bru_report.testing.rendering import RENDER_TIME


@pytest.fixture
def render_time() -> datetime:
    """Fixed render timestamp."""
    return RENDER_TIME


@pytest.fixture
def echo_report() -> RunReport:
    """Single iteration of five requests, the first one failing."""
    return RunReport.model_validate(payloads.echo_run())
