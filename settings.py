import os

MONGODB_HOST = os.environ.get('ZONEDCODEC_MONGODB_HOST', 'localhost')

MONGODB_PORT = int(os.environ.get('ZONEDCODEC_MONGODB_PORT', '27017'))

DATABASE = os.environ.get('ZONEDCODEC_DATABASE', 'test')

COLLECTION = os.environ.get('ZONEDCODEC_COLLECTION', 'datetime')

DOCUMENT_ID = os.environ.get('ZONEDCODEC_DOCUMENT_ID', 'testing')

# zone applied to every decoded date
ZONE = os.environ.get('ZONEDCODEC_ZONE', 'Europe/Paris')

# zone of the value written by the demo
SOURCE_ZONE = os.environ.get('ZONEDCODEC_SOURCE_ZONE', 'Europe/London')

LOG_LEVEL = os.environ.get('ZONEDCODEC_LOG_LEVEL', 'INFO')
