"""Duration class representing an exact span of time.

Isochron only needs durations to report how long one unit is, so this is a
small seconds-and-nanoseconds value rather than a full arithmetic type.
"""

from __future__ import annotations

from isochron._internal.constants import NANOS_PER_SECOND, SECONDS_PER_DAY


class Duration:
    """A span of time with nanosecond precision.

    The internal representation is normalized such that:
    - `_seconds` carries the sign and may be any integer
    - `_nanos` is always in the range [0, 1_000_000_000)

    Attributes:
        seconds: The whole seconds (can be negative).
        nanoseconds: The nanoseconds within the second [0, 1e9).

    Examples:
        >>> d = Duration(days=1, seconds=3600)
        >>> d.seconds
        90000

        >>> Duration(nanoseconds=-1)
        Duration(seconds=-1, nanoseconds=999999999)
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(
        self,
        days: int = 0,
        seconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero. The resulting
        duration is normalized to canonical form.

        Args:
            days: Number of 24 hour days.
            seconds: Number of seconds.
            nanoseconds: Number of nanoseconds.
        """
        total_nanos = (days * SECONDS_PER_DAY + seconds) * NANOS_PER_SECOND + nanoseconds
        self._seconds, self._nanos = divmod(total_nanos, NANOS_PER_SECOND)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration from seconds plus a nanosecond adjustment.

        Examples:
            >>> Duration.of_seconds(31_556_952).seconds
            31556952
        """
        return cls(seconds=seconds, nanoseconds=nano_adjustment)

    @classmethod
    def of_nanos(cls, nanoseconds: int) -> Duration:
        return cls(nanoseconds=nanoseconds)

    @property
    def seconds(self) -> int:
        """Return the whole seconds (floor of the exact value)."""
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        """Return the nanoseconds within the second, always non-negative."""
        return self._nanos

    @property
    def total_nanoseconds(self) -> int:
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def is_zero(self) -> bool:
        return self._seconds == 0 and self._nanos == 0

    def is_negative(self) -> bool:
        return self._seconds < 0

    def __mul__(self, other: object) -> Duration:
        """Scale the duration by an integer.

        Examples:
            >>> Duration(seconds=86400) * 7
            Duration(seconds=604800, nanoseconds=0)
        """
        if not isinstance(other, int):
            return NotImplemented
        return Duration(nanoseconds=self.total_nanoseconds * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) < (other._seconds, other._nanos)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) <= (other._seconds, other._nanos)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) > (other._seconds, other._nanos)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) >= (other._seconds, other._nanos)

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanoseconds={self._nanos})"

    def __bool__(self) -> bool:
        """Return True if the duration is non-zero."""
        return not self.is_zero()


__all__ = ["Duration"]
