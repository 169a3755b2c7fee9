from datetime import datetime, timezone


class SystemDateTime:
    """Wall clock in UTC"""

    @property
    def utc_now(self) -> datetime:
        return datetime.now(timezone.utc)
