import functools
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from bson import DatetimeMS

from codec_errors import InvalidZoneError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# resolves an IANA identifier (or an existing ZoneInfo) to a ZoneInfo
def load_zone(zone):
    if isinstance(zone, ZoneInfo):
        return zone
    if not isinstance(zone, str) or not zone:
        raise InvalidZoneError(zone)
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidZoneError(zone) from e


# an absolute instant (milliseconds since epoch) paired with the zone used to display it
@functools.total_ordering
class ZonedTimestamp:
    __slots__ = ('_instant', '_tz')

    def __init__(self, instant, zone):
        if isinstance(instant, bool) or not isinstance(instant, int):
            raise TypeError('instant must be an int of epoch milliseconds, not %s' % type(instant).__name__)
        if not INT64_MIN <= instant <= INT64_MAX:
            raise ValueError('instant %d does not fit in a signed 64-bit integer' % instant)
        self._instant = int(instant)
        self._tz = load_zone(zone)

    # truncates to milliseconds; datetimes carrying a bare offset need an explicit zone
    @classmethod
    def from_datetime(cls, dt, zone=None):
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError('cannot take the instant of a naive datetime: %r' % dt)
        if zone is None:
            if dt.tzinfo is timezone.utc:
                zone = 'UTC'
            else:
                zone = getattr(dt.tzinfo, 'key', None)
            if zone is None:
                raise ValueError('datetime %r has no IANA zone, pass one explicitly' % dt)
        return cls(int(DatetimeMS(dt)), zone)

    @classmethod
    def now(cls, zone):
        return cls(int(DatetimeMS(datetime.now(timezone.utc))), zone)

    @property
    def instant(self):
        return self._instant

    @property
    def zone(self):
        return self._tz.key

    @property
    def tzinfo(self):
        return self._tz

    # same instant, seen from another zone
    def with_zone(self, zone):
        return ZonedTimestamp(self._instant, zone)

    def to_datetime(self):
        return (EPOCH + timedelta(milliseconds=self._instant)).astimezone(self._tz)

    def utcoffset(self):
        return self.to_datetime().utcoffset()

    @property
    def year(self):
        return self.to_datetime().year

    @property
    def month(self):
        return self.to_datetime().month

    @property
    def day(self):
        return self.to_datetime().day

    @property
    def hour(self):
        return self.to_datetime().hour

    @property
    def minute(self):
        return self.to_datetime().minute

    @property
    def second(self):
        return self.to_datetime().second

    @property
    def millisecond(self):
        return self.to_datetime().microsecond // 1000

    def isoformat(self):
        return '%s[%s]' % (self.to_datetime().isoformat(timespec='milliseconds'), self.zone)

    def __eq__(self, other):
        if not isinstance(other, ZonedTimestamp):
            return NotImplemented
        return self._instant == other._instant

    def __lt__(self, other):
        if not isinstance(other, ZonedTimestamp):
            return NotImplemented
        return self._instant < other._instant

    def __hash__(self):
        return hash(self._instant)

    def __repr__(self):
        return 'ZonedTimestamp(%d, %r)' % (self._instant, self.zone)

    def __str__(self):
        return self.isoformat()
