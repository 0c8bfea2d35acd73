import pandas as pd

from .utils import mapping_keys, mapping_entries, tryprint


class KeyedCollectionError(Exception):
    """Base class for errors raised by a KeyedCollection."""


class MissingKeyGeneratorError(KeyedCollectionError):
    """Raised when a key has to be derived from an item but the collection
    was built without a key generator."""


class EmptyCollectionError(KeyedCollectionError, ValueError):
    """Raised when reducing an empty collection without a start value."""


# sentinel for an omitted `start` argument
_MISSING = object()


class KeyedCollection:
    """Dictionary-like container of items indexed by a key.

    The object has two elements:
    - key_generator: optional function item -> key, used by `add` to store an
        item without an explicit key.
    - _items: dictionary mapping keys to items, in insertion order.

    Storing an item under an existing key replaces the previous one. Items are
    not copied: the collection holds the same objects as the caller.

    The object can be:
    - indexed by key, and the corresponding item is returned.
    - iterated over all of its items like a list.
    - transformed with `map` and `filter`, which return new collections and
        leave this one untouched.
    - folded into a single value with `reduce`.
    """

    def __init__(self, key_generator=None, verbose=False):
        self.key_generator = key_generator
        self.verbose = verbose
        self._items = {}

    @classmethod
    def from_items(cls, items, key_generator, verbose=False) -> "KeyedCollection":
        """Creates a collection containing `items`, each stored under the key
        returned by `key_generator`.

        Args:
            items (iterable): items to be added, in order.
            key_generator (callable): function item -> key.
            verbose (bool): report overwritten keys on stderr.

        Returns:
            KeyedCollection: the populated collection.
        """
        if key_generator is None:
            raise MissingKeyGeneratorError(
                "from_items requires a key generator to index the items."
            )
        collection = cls(key_generator, verbose=verbose)
        for item in items:
            collection.add(item)
        return collection

    def __contains__(self, key):
        """Returns whether the key is in the collection"""
        return key in self._items

    def __iter__(self):
        """Returns an iterator over the items"""
        return iter(self.items())

    def __len__(self):
        return len(self._items)

    def __getitem__(self, key):
        """Returns the item corresponding to the key"""
        try:
            return self._items[key]
        except KeyError:
            raise KeyError(
                f"Key {key!r} not found in collection {self.__class__.__name__}"
            )

    def __setitem__(self, key, item):
        self.set(key, item)

    def __delitem__(self, key):
        if key not in self._items:
            raise KeyError(
                f"Key {key!r} not found in collection {self.__class__.__name__}"
            )
        del self._items[key]

    def __repr__(self):
        return f"{self.__class__.__name__} object with {len(self)} items"

    def __str__(self):
        return self.__repr__()

    # --------------------------------------------------------------------
    # mutation

    def add(self, item):
        """Stores `item` under the key computed by the key generator and
        returns that key."""
        if self.key_generator is None:
            raise MissingKeyGeneratorError(
                "No key generator specified. Specify one in the construction "
                "of this collection or provide the keys manually with set()."
            )
        key = self.key_generator(item)
        self.set(key, item)
        return key

    def set(self, key, item) -> None:
        if key in self._items:
            tryprint(f"overwriting item with key {key!r}", self.verbose)
        self._items[key] = item

    def get(self, key, default=None):
        """Returns the item stored under `key`, or `default` if there is none.
        Falsy items (0, "", empty containers) are returned as stored."""
        if key in self._items:
            return self._items[key]
        return default

    def delete(self, key, default=None):
        """Removes the item stored under `key` and returns it. If the key is
        missing the collection is left unchanged and `default` is returned."""
        if key not in self._items:
            tryprint(f"no item with key {key!r} to delete", self.verbose)
            return default
        return self._items.pop(key)

    def clear(self) -> None:
        """Removes all items. The key generator is kept."""
        self._items = {}

    # --------------------------------------------------------------------
    # lookup and views

    def key_of(self, item):
        """Returns the key of the first entry holding `item`, or None.

        An entry matches if it holds the very same object or an object equal
        to it, as for `list.index`. Comparisons that do not return a boolean
        (numpy arrays, pandas objects) only match by identity. The scan is
        linear in the number of items.
        """
        for key, stored in self.entries():
            if stored is item:
                return key
            equal = stored == item
            if pd.api.types.is_bool(equal) and equal:
                return key
        return None

    def keys(self) -> list:
        """Returns the list of keys"""
        return mapping_keys(self._items)

    def items(self) -> list:
        """Returns the list of items"""
        return list(self._items.values())

    def entries(self) -> list[tuple]:
        """Returns the list of (key, item) pairs"""
        return mapping_entries(self._items)

    def to_dict(self) -> dict:
        """Returns a shallow copy of the underlying dictionary key -> item"""
        return dict(self._items)

    def to_series(self) -> pd.Series:
        """Returns a pandas Series whose index are the keys and values are
        the items."""
        return pd.Series(self.items(), index=self.keys(), dtype=object)

    # --------------------------------------------------------------------
    # iteration

    def for_each(self, func) -> None:
        for item in self.items():
            func(item)

    def for_each_key(self, func) -> None:
        for key in self.keys():
            func(key)

    def for_each_entry(self, func) -> None:
        """Calls `func((key, item), index)` on every entry."""
        for index, entry in enumerate(self.entries()):
            func(entry, index)

    # --------------------------------------------------------------------
    # transformations

    def map(self, func) -> "KeyedCollection":
        """Returns a new collection with the same keys and items `func(item)`.
        The new collection has no key generator."""
        mapped = self.__class__(verbose=self.verbose)
        for key, item in self.entries():
            mapped.set(key, func(item))
        return mapped

    def filter(self, func) -> "KeyedCollection":
        """Returns a new collection with the entries for which
        `func(item, index)` is true. Keys and key generator are kept."""
        filtered = self.__class__(self.key_generator, verbose=self.verbose)
        for index, (key, item) in enumerate(self.entries()):
            if func(item, index):
                filtered.set(key, item)
        return filtered

    def find(self, func):
        """Returns the first item for which `func(item)` is true, or None."""
        for item in self.items():
            if func(item):
                return item
        return None

    def reduce(self, func, start=_MISSING):
        """Folds the items into a single value.

        Args:
            func (callable): called as `func(acc, item, index, items)`, where
                `index` is the position of `item` in `items`, the list of items
                being folded. Returns the new accumulator.
            start: initial accumulator. If omitted, the first item is used as
                initial accumulator and the fold runs over the remaining items, as
                `reduce(func, first_item)` on a collection without it.

        Returns:
            the final accumulator.

        Raises:
            EmptyCollectionError: if the collection is empty and no start
                value is given.
        """
        items = self.items()
        if start is _MISSING:
            if len(items) == 0:
                raise EmptyCollectionError(
                    f"reduce of empty {self.__class__.__name__} with no start value"
                )
            acc, items = items[0], items[1:]
        else:
            acc = start
        for index, item in enumerate(items):
            acc = func(acc, item, index, items)
        return acc
