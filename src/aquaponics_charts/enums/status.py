from enum import Enum


class ReadingStatus(str, Enum):
    """Position of a reading relative to its threshold band."""
    LOW = "low"
    OPTIMAL = "optimal"
    HIGH = "high"

    @property
    def color(self) -> str:
        return STATUS_COLORS[self]


STATUS_COLORS = {
    ReadingStatus.LOW: "#3b82f6",
    ReadingStatus.OPTIMAL: "#17c964",
    ReadingStatus.HIGH: "#f31260",
}

# Tie-break order for the dominant status of a series
STATUS_PRIORITY = (ReadingStatus.OPTIMAL, ReadingStatus.LOW, ReadingStatus.HIGH)


class Severity(str, Enum):
    """Alert severity of a reading against the widened warning/critical zones."""
    OPTIMAL = "optimal"
    WARNING = "warning"
    CRITICAL = "critical"
