from datetime import datetime, timezone


class Clock:
    """UTC time source, injected wherever a timestamp is recorded."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
