from enum import StrEnum


class Level(StrEnum):
    """Violation severity levels (ordered lowest → highest)."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


LEVEL_ORDER: dict[Level, int] = {
    Level.INFO: 0,
    Level.WARNING: 1,
    Level.ERROR: 2,
}
