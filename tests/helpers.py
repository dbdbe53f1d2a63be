from datetime import datetime, timezone

import bson
from bson import DatetimeMS
from bson.codec_options import DEFAULT_CODEC_OPTIONS


def millis(*args):
    return int(DatetimeMS(datetime(*args, tzinfo=timezone.utc)))


# in-memory stand-in for a pymongo collection; documents go through real BSON bytes
class BsonCollection:
    def __init__(self, codec_options):
        self.codec_options = codec_options or DEFAULT_CODEC_OPTIONS
        self.documents = {}

    def replace_one(self, filter, replacement, upsert=False):
        key = filter['_id']
        if key not in self.documents and not upsert:
            return
        document = dict(replacement)
        document['_id'] = key
        self.documents[key] = bson.encode(document, codec_options=self.codec_options)

    def find_one(self, filter):
        data = self.documents.get(filter['_id'])
        if data is None:
            return None
        return bson.decode(data, codec_options=self.codec_options)


class FakeDatabase:
    def __init__(self, client, name):
        self.client = client
        self.name = name

    def get_collection(self, name, codec_options=None):
        collection = BsonCollection(codec_options)
        self.client.collections[(self.name, name)] = collection
        return collection


class FakeMongoClient:
    instances = []

    def __init__(self, host=None, port=None):
        self.host = host
        self.port = port
        self.collections = {}
        self.closed = False
        FakeMongoClient.instances.append(self)

    def __getitem__(self, name):
        return FakeDatabase(self, name)

    def close(self):
        self.closed = True
