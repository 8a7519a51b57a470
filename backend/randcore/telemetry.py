"""Generation telemetry: events, sinks and the emitting service."""
import logging
from dataclasses import dataclass
from typing import Any, Protocol


logger = logging.getLogger(__name__)


class TelemetrySink(Protocol):
    """Protocol for telemetry sinks."""

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        """Emit a telemetry event."""
        ...


class LoggingTelemetrySink:
    """Default sink that logs telemetry events."""

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        """Log telemetry event."""
        logger.info("TELEMETRY %s: %s", event_name, data)


@dataclass
class GenerationServedEvent:
    """generation_served: one successful generate() call."""

    mode: str
    value_count: int
    bonus_count: int
    warning_count: int
    duration_ms: float
    security_sensitive: bool
    # Correlates events with the limits in force
    config_hash: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {
            "mode": self.mode,
            "value_count": self.value_count,
            "bonus_count": self.bonus_count,
            "warning_count": self.warning_count,
            "duration_ms": self.duration_ms,
            "security_sensitive": self.security_sensitive,
            "config_hash": self.config_hash,
        }


@dataclass
class GenerationFailedEvent:
    """generation_failed: a generate() call aborted by a fatal error."""

    mode: str
    reason: str  # "ENTROPY_UNAVAILABLE" | "INVALID_RANGE" | "RANGE_TOO_LARGE"
    config_hash: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {
            "mode": self.mode,
            "reason": self.reason,
            "config_hash": self.config_hash,
        }


class TelemetryService:
    """Service for emitting generation telemetry events."""

    def __init__(self, sink: TelemetrySink | None = None):
        self._sink = sink or LoggingTelemetrySink()
        self._sink_errors = 0  # Counter for sink failures

    def set_sink(self, sink: TelemetrySink) -> None:
        """Set the telemetry sink (useful for testing)."""
        self._sink = sink

    @property
    def sink_errors(self) -> int:
        return self._sink_errors

    def _safe_emit(self, event_name: str, data: dict[str, Any]) -> None:
        """
        Emit event with exception safety.

        Sink failures MUST NOT break a generation call.
        """
        try:
            self._sink.emit(event_name, data)
        except Exception as e:
            self._sink_errors += 1
            logger.warning(
                "Telemetry sink error (count=%d): %s - %s",
                self._sink_errors,
                event_name,
                str(e),
            )

    def emit_generation_served(self, event: GenerationServedEvent) -> None:
        self._safe_emit("generation_served", event.to_dict())

    def emit_generation_failed(self, event: GenerationFailedEvent) -> None:
        self._safe_emit("generation_failed", event.to_dict())


# Global instance
telemetry_service = TelemetryService()
