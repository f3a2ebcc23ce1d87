from .config import APP_VERSION as __version__
from .cursor import BidirIterable, Cursor, Indexable, bidir_iter
from .iterator import Backward, BidirIterator, Filter, Forward, Map

__all__ = [
    'Backward',
    'BidirIterable',
    'BidirIterator',
    'Cursor',
    'Filter',
    'Forward',
    'Indexable',
    'Map',
    'bidir_iter',
]
