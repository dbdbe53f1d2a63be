import logging

import settings


def init(level=None):
    logging.getLogger('pymongo').setLevel(logging.WARNING)
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.StreamHandler()
        ]
    )
