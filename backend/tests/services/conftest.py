"""Service fixtures: lifecycle with a pinned clock, registry, aggregation, status.

Invariants:
    - All services share the per-test RoundStore from the root conftest
    - Local timezone is UTC
"""

from datetime import timezone

import pytest

from workhours.services.aggregation_service import AggregationService
from workhours.services.group_registry import GroupRegistry
from workhours.services.round_lifecycle import RoundLifecycle
from workhours.services.status_view import StatusService


@pytest.fixture
def lifecycle(store, clock):
    return RoundLifecycle(store, clock=clock)


@pytest.fixture
def registry(store):
    return GroupRegistry(store)


@pytest.fixture
def aggregation(store):
    return AggregationService(store, timezone.utc)


@pytest.fixture
def status_service(store):
    return StatusService(store, timezone.utc)
