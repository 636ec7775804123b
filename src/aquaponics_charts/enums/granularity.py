from enum import Enum


class GranularityBucket(str, Enum):
    """Display granularity of a time span, ordered from finest to coarsest."""
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    def __lt__(self, other):
        if not isinstance(other, GranularityBucket):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, GranularityBucket):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, GranularityBucket):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, GranularityBucket):
            return NotImplemented
        return self.rank >= other.rank


_ORDER = list(GranularityBucket)
