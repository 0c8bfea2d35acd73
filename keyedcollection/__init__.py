# keyed collection class
from .keyed_collection import KeyedCollection

# errors
from .keyed_collection import (
    KeyedCollectionError,
    MissingKeyGeneratorError,
    EmptyCollectionError,
)

# assertion and mapping helpers
from .utils import assert_condition, mapping_keys, mapping_entries
