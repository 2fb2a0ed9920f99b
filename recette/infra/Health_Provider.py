"""Health-data providers: authorization-scoped cumulative step counts."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

StepSample = Tuple[datetime, int]


class HealthDataProvider:
    """Collaborator interface for the device health-data API."""

    def is_available(self) -> bool:
        raise NotImplementedError

    def request_authorization(self) -> bool:
        raise NotImplementedError

    def cumulative_step_count(self, start: datetime, end: datetime) -> int:
        raise NotImplementedError


class StubHealthDataProvider(HealthDataProvider):
    """In-memory provider: step samples are (timestamp, count) pairs."""

    def __init__(self, samples: Optional[Iterable[StepSample]] = None,
                 available: bool = True, authorized: bool = True):
        self.samples: List[StepSample] = list(samples or [])
        self.available = available
        self.authorized = authorized
        self.authorization_requested = False

    def add_sample(self, timestamp: datetime, count: int):
        self.samples.append((timestamp, int(count)))

    def is_available(self) -> bool:
        return self.available

    def request_authorization(self) -> bool:
        self.authorization_requested = True
        return self.authorized

    def cumulative_step_count(self, start: datetime, end: datetime) -> int:
        if not self.authorized:
            raise PermissionError("step count read access not granted")
        return sum(count for ts, count in self.samples if start <= ts <= end)


def fetch_today_step_count(provider: HealthDataProvider, now: Optional[datetime] = None) -> int:
    """Steps from the start of today until ``now``; 0 when health data cannot be read."""
    if not provider.is_available():
        logger.info("Health data is not available on this device")
        return 0
    if not provider.request_authorization():
        logger.warning("Health data authorization failed")
        return 0
    now = now or datetime.now()
    start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
    try:
        return int(provider.cumulative_step_count(start_of_day, now))
    except PermissionError as e:
        logger.warning("Failed to fetch step count: %s", e)
        return 0


__all__ = ['HealthDataProvider', 'StubHealthDataProvider', 'fetch_today_step_count']
