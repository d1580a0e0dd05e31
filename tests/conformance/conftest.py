"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.frontend_runner import FrontendRunner
from tests.conformance.runners.roundtrip_runner import RoundTripRunner


def get_available_runners():
    """Every runner sees the same source tables."""
    return [FrontendRunner(), RoundTripRunner()]


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide each conformance runner in turn.

    - frontend: scans and parses in-process
    - roundtrip: as frontend, but trees come from re-parsing the printed module
    """
    return request.param
