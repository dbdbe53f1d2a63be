import datetime
import functools
import logging

from bson import DatetimeMS
from bson.codec_options import CodecOptions
from bson.codec_options import DatetimeConversion
from bson.codec_options import TypeCodec
from bson.codec_options import TypeEncoder
from bson.codec_options import TypeRegistry

import settings
from codec_errors import TypeMismatchError
from zoned_timestamp import ZonedTimestamp, load_zone

logger = logging.getLogger(__name__)


# decodes every BSON date_time into a ZonedTimestamp in one fixed zone
class ZonedDateTimeCodec(TypeCodec):
    python_type = ZonedTimestamp
    bson_type = DatetimeMS

    def __init__(self, zone):
        self._tz = load_zone(zone)

    @property
    def zone(self):
        return self._tz.key

    @property
    def tzinfo(self):
        return self._tz

    # the wire format has no zone, only the instant survives
    def encode(self, value):
        if not isinstance(value, ZonedTimestamp):
            raise TypeMismatchError(ZonedTimestamp.__name__, type(value).__name__)
        return value.instant

    def decode(self, value):
        if isinstance(value, DatetimeMS):
            return ZonedTimestamp(int(value), self._tz)
        # what the driver hands out under the default datetime conversion, naive means UTC
        if isinstance(value, datetime.datetime):
            return ZonedTimestamp(int(DatetimeMS(value)), self._tz)
        raise TypeMismatchError('date_time', type(value).__name__)

    def transform_python(self, value):
        return DatetimeMS(self.encode(value))

    def transform_bson(self, value):
        return self.decode(value)

    def __repr__(self):
        return 'ZonedDateTimeCodec(%r)' % self.zone


# dates are stored as midnight UTC; they come back through the date_time decoder
class DateCodec(TypeEncoder):
    python_type = datetime.date

    def transform_python(self, value):
        return DatetimeMS(datetime.datetime.combine(value, datetime.time(0, 0, 0, 0, tzinfo=datetime.timezone.utc)))


GENERIC_CODECS = (DateCodec(),)


# layers codec sources into one TypeRegistry; sources are ordered most specific
# first and, within a source, the first codec declaring a type wins. Types no
# source declares fall through to the built-in BSON encoders and decoders.
def compose(*sources):
    codecs = []
    for source in sources:
        codecs.extend(source)
    # registry maps are last-wins
    return TypeRegistry(list(reversed(codecs)))


def build(zone, specific=(), generic=GENERIC_CODECS):
    zoned_codec = ZonedDateTimeCodec(zone)
    type_registry = compose([zoned_codec] + list(specific), generic)
    logger.debug('decoding date_time values as %r', zoned_codec)
    return CodecOptions(
        tz_aware=True,
        tzinfo=zoned_codec.tzinfo,
        type_registry=type_registry,
        datetime_conversion=DatetimeConversion.DATETIME_MS,
    )


@functools.lru_cache(maxsize=32)
def get(zone=settings.ZONE):
    return build(zone)
