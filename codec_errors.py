# base class for everything raised by the zoned datetime codec
class ZonedCodecError(Exception):
    pass


# raised when a timezone identifier is not in the IANA database
class InvalidZoneError(ZonedCodecError, ValueError):
    def __init__(self, zone):
        super().__init__('Unknown timezone identifier: %r' % (zone,))
        self.zone = zone


# raised when a value does not carry the type a codec can handle
class TypeMismatchError(ZonedCodecError, TypeError):
    def __init__(self, expected, actual):
        super().__init__('Unable to decode value of type %s, expected %s' % (actual, expected))
        self.expected = expected
        self.actual = actual


# raised by the demo when a value read back differs from the one written
class RoundTripError(ZonedCodecError):
    pass
