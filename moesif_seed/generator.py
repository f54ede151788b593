"""
Synthetic `application_created` event generation.

Builds randomized but plausible Moesif action payloads. Everything here is pure
computation: no network, no filesystem, no environment access. Randomness comes
from a `random.Random` owned by each generator so content choices can be made
reproducible with a seed. Identifiers never use that seeded source: they draw
their random part from the operating system so two generators built with the
same seed still produce distinct ids.

Usage:
    from moesif_seed.generator import EventGenerator

    generator = EventGenerator(seed=42)
    events = generator.generate_batch(500, template_id="nextjs-application")
"""

from __future__ import annotations

import itertools
import random
import string
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from moesif_seed.domain.models import (
    ACTION_NAME,
    ActionRequest,
    ApplicationCreatedEvent,
    ApplicationMetadata,
)
from moesif_seed.utils.logging import get_logger

log = get_logger(__name__)

TEMPLATE_IDS = (
    "nextjs-application",
    "react-spa",
    "vue-application",
    "express-api",
    "django-backend",
    "spring-boot-api",
    "fastapi-service",
    "rails-webapp",
)

ORG_NAMES = (
    "Acme Corp",
    "TechStart Inc",
    "DevOps Solutions",
    "CloudNative Labs",
    "DataDriven Co",
    "API First Systems",
    "MicroServices Ltd",
    "Platform Engineering",
)

APP_PREFIXES = (
    "dashboard",
    "api-gateway",
    "user-service",
    "payment-processor",
    "analytics",
    "notification-service",
    "auth-service",
    "data-pipeline",
)

DEFAULT_LOOKBACK_DAYS = 30

_BASE36 = string.digits + string.ascii_lowercase
_RANDOM_ID_LENGTH = 11
_APP_SUFFIX_LENGTH = 5

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_base36(value: int) -> str:
    """Render a non-negative integer in lowercase base 36."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def to_iso8601(moment: datetime) -> str:
    """
    Format a datetime as a UTC ISO-8601 string with millisecond precision.

    Naive datetimes are taken to be UTC already. Output looks like
    `2024-01-15T10:30:00.000Z`.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso8601(value: str) -> datetime:
    """Inverse of `to_iso8601`; accepts a trailing `Z`."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class IdGenerator:
    """
    Produces identifiers unique for the lifetime of the instance.

    Each id combines the wall clock in epoch milliseconds, a strictly increasing
    counter and a random base36 suffix. The counter keeps ids from one instance
    apart within the same millisecond; the suffix, drawn from `SystemRandom` by
    default, keeps separate instances apart.
    """

    def __init__(self, rng: Optional[random.Random] = None, clock: Clock = _utcnow) -> None:
        self._rng = rng or random.SystemRandom()
        self._clock = clock
        self._counter = itertools.count()

    def _random_suffix(self, length: int) -> str:
        return "".join(self._rng.choice(_BASE36) for _ in range(length))

    def generate_id(self, prefix: str = "") -> str:
        timestamp = int(self._clock().timestamp() * 1000)
        counter = to_base36(next(self._counter))
        random_part = self._random_suffix(_RANDOM_ID_LENGTH)
        if prefix:
            return f"{prefix}_{timestamp}_{counter}_{random_part}"
        return f"{timestamp}_{counter}_{random_part}"


class EventGenerator:
    """
    Generates `application_created` events.

    Parameters
    ----------
    lookback_days : int
        Width of the window, ending now, that random event times fall into.
    seed : int, optional
        Seed for template, organization, application-name and time choices.
        Identifiers are never seeded, so a seed reproduces the content of a
        batch but not its ids.
    clock : callable, optional
        Returns the current time as an aware datetime. Tests pass a fixed clock.
    """

    def __init__(
        self,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        seed: Optional[int] = None,
        clock: Clock = _utcnow,
    ) -> None:
        if lookback_days < 0:
            raise ValueError("lookback_days must be non-negative")
        try:
            clock() - timedelta(days=lookback_days)
        except OverflowError as exc:
            raise ValueError(
                f"lookback_days={lookback_days} reaches before the earliest representable date"
            ) from exc
        self.lookback_days = lookback_days
        self._rng = random.Random(seed)
        self._clock = clock
        self.ids = IdGenerator(clock=clock)

    def generate_id(self, prefix: str = "") -> str:
        return self.ids.generate_id(prefix)

    def random_past_time(self) -> datetime:
        """Pick a uniformly random moment within the look-back window."""
        offset = timedelta(days=self._rng.random() * self.lookback_days)
        return self._clock() - offset

    def _application_name(self) -> str:
        prefix = self._rng.choice(APP_PREFIXES)
        suffix = "".join(self._rng.choice(_BASE36) for _ in range(_APP_SUFFIX_LENGTH))
        return f"{prefix}-{suffix}"

    def generate_event(
        self,
        template_id: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> ApplicationCreatedEvent:
        """
        Build one event.

        `template_id` replaces the random template choice and `timestamp` replaces
        the random look-back time; every other field is drawn independently.
        """
        event_time = to_iso8601(timestamp if timestamp is not None else self.random_past_time())

        return ApplicationCreatedEvent(
            action_name=ACTION_NAME,
            user_id=self.generate_id("user"),
            company_id=self.generate_id("company"),
            request=ActionRequest(time=event_time),
            metadata=ApplicationMetadata(
                template_id=template_id or self._rng.choice(TEMPLATE_IDS),
                application_id=self.generate_id("app"),
                application_name=self._application_name(),
                organization_id=self.generate_id("org"),
                organization_name=self._rng.choice(ORG_NAMES),
                created_at=event_time,
            ),
        )

    def generate_batch(
        self,
        count: int,
        template_id: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> List[ApplicationCreatedEvent]:
        """
        Generate `count` independent events sorted oldest first by request time.

        Raises
        ------
        ValueError
            If `count` is negative or not an integer.
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"count must be an integer, got {count!r}")
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        events = [
            self.generate_event(template_id=template_id, timestamp=timestamp)
            for _ in range(count)
        ]
        events.sort(key=lambda event: parse_iso8601(event.request.time))

        log.debug(
            "Generated event batch",
            extra={"count": count, "template_id": template_id, "lookback_days": self.lookback_days},
        )
        return events


__all__ = [
    "APP_PREFIXES",
    "DEFAULT_LOOKBACK_DAYS",
    "EventGenerator",
    "IdGenerator",
    "ORG_NAMES",
    "TEMPLATE_IDS",
    "parse_iso8601",
    "to_base36",
    "to_iso8601",
]
