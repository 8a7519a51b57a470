"""Pytest fixtures for backend tests."""
from typing import Any, Callable

import pytest

from randcore.logic.engine import GeneratorEngine
from randcore.logic.entropy import EntropySource
from randcore.logic.rng import SeededRNG
from randcore.telemetry import TelemetryService


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "statistical: marks tests that sample the production CSPRNG"
    )


class RecordingTelemetrySink:
    """Telemetry sink that keeps every event for assertions."""

    def __init__(self):
        self.events: list[tuple[str, dict[str, Any]]] = []

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        self.events.append((event_name, data))

    def get_events(self, event_name: str) -> list[dict[str, Any]]:
        return [data for name, data in self.events if name == event_name]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def recording_sink() -> RecordingTelemetrySink:
    """Create a fresh recording sink for each test."""
    return RecordingTelemetrySink()


@pytest.fixture
def telemetry(recording_sink: RecordingTelemetrySink) -> TelemetryService:
    """TelemetryService writing into the recording sink."""
    return TelemetryService(sink=recording_sink)


@pytest.fixture
def seeded_engine(telemetry: TelemetryService) -> Callable[[int], GeneratorEngine]:
    """
    Factory for deterministic engines.

    Each engine owns one SeededRNG shared by all of its calls, so a
    sequence of generate() calls is reproducible from the seed.
    """
    def make(seed: int = 42) -> GeneratorEngine:
        rng = SeededRNG(seed=seed)
        return GeneratorEngine(rng_factory=lambda _ctx: rng, telemetry=telemetry)

    return make


@pytest.fixture
def engine(seeded_engine: Callable[[int], GeneratorEngine]) -> GeneratorEngine:
    """Deterministic engine seeded with 42."""
    return seeded_engine(42)


@pytest.fixture
def production_engine(telemetry: TelemetryService) -> GeneratorEngine:
    """Engine on the platform CSPRNG."""
    return GeneratorEngine(telemetry=telemetry)


@pytest.fixture
def unavailable_entropy() -> EntropySource:
    """Entropy source for a platform without a CSPRNG."""
    return EntropySource.unavailable()


@pytest.fixture
def no_csprng_engine(
    unavailable_entropy: EntropySource, telemetry: TelemetryService
) -> GeneratorEngine:
    """Production engine on a platform without a CSPRNG."""
    return GeneratorEngine(entropy=unavailable_entropy, telemetry=telemetry)
