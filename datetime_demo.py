import argparse
import logging
import sys

import pymongo
import simplejson as json

import codec_options
import log_config
import settings
from codec_errors import RoundTripError, TypeMismatchError, ZonedCodecError
from zoned_timestamp import ZonedTimestamp

logger = logging.getLogger(__name__)


# writes value (plus any extra fields) under document_id, upserting so the demo can be rerun, and reads it back
def round_trip(collection, document_id, value, **extra):
    document = dict(extra, date=value)
    collection.replace_one({'_id': document_id}, document, upsert=True)
    found = collection.find_one({'_id': document_id})
    if found is None:
        raise RoundTripError('Document %r not found after upsert' % (document_id,))
    date = found.get('date')
    if not isinstance(date, ZonedTimestamp):
        raise TypeMismatchError(ZonedTimestamp.__name__, type(date).__name__)
    return found, date


# the value read back must carry the codec's zone but the instant that was written
def check(source, decoded, zone):
    if decoded.zone != zone:
        raise RoundTripError('Decoded zone %s, expected %s' % (decoded.zone, zone))
    if decoded.instant != source.instant:
        raise RoundTripError('Decoded instant %d differs from written instant %d' % (decoded.instant, source.instant))
    return decoded.utcoffset() - source.utcoffset()


def preview(filename, document):
    with open(filename, 'w') as f:
        f.write(json.dumps(document, indent=4, default=str))


def demo(args):
    opts = codec_options.get(args.zone)
    source = ZonedTimestamp.now(args.source_zone)
    logger.info('writing %s', source)

    mongo_client = pymongo.MongoClient(args.mongodb_host, args.mongodb_port)
    try:
        collection = mongo_client[args.database].get_collection(args.collection, codec_options=opts)
        # a plain date goes through the generic codecs and comes back as midnight UTC
        found, decoded = round_trip(collection, args.document_id, source, day=source.to_datetime().date())
    finally:
        mongo_client.close()

    logger.info('read back %s', decoded)
    logger.info('day %s read back as %s', source.to_datetime().date(), found.get('day'))
    shift = check(source, decoded, args.zone)
    logger.info('same instant, wall clock shifted by %s (%s -> %s)', shift, source.zone, decoded.zone)

    if args.preview:
        preview(args.preview, found)
        logger.info('wrote %s', args.preview)
    return decoded


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Write a zoned date to MongoDB and read it back in a fixed zone')
    parser.add_argument('--mongodb-host', default=settings.MONGODB_HOST, help='MongoDB host')
    parser.add_argument('--mongodb-port', default=settings.MONGODB_PORT, type=int, help='MongoDB port')
    parser.add_argument('--database', default=settings.DATABASE, help='Name of the MongoDB database')
    parser.add_argument('--collection', default=settings.COLLECTION, help='Name of the collection to write to')
    parser.add_argument('--document-id', default=settings.DOCUMENT_ID, help='_id of the demo document')
    parser.add_argument('--zone', default=settings.ZONE, help='Timezone applied to every decoded date')
    parser.add_argument('--source-zone', default=settings.SOURCE_ZONE, help='Timezone of the date that is written')
    parser.add_argument('--preview', metavar='FILE', help='Write the document read back to a JSON file')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    log_config.init()
    try:
        demo(args)
    except ZonedCodecError as e:
        logger.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
