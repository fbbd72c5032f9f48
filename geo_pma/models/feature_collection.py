"""
Queryable collections of decoded features.

A FeatureCollection keeps the records of one kind in feed order. Feed order
matters: it is the order lines are written in.
"""

import logging
from collections.abc import Iterable
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar, Union

from .kind import FeatureKind
from .feature import decode_feature
from .validation import FeatureDecodeError, ModelValidationError, ValidationResult

logger = logging.getLogger(__name__)

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering and querying in-memory data.

    Examples:
        # Basic filtering
        collection.filter(lambda x: x.latitude < -20).all()

        # Attribute matching
        collection.where(runway_key=12).all()

        # Grouping
        collection.group_by(lambda x: x.airport_key)
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        """
        Initialize a queryable collection.

        Args:
            items: List or iterable of items to wrap
        """
        self._items: List[T] = list(items) if not isinstance(items, list) else items

    def _derive(self, items: List[T]) -> 'QueryableCollection[T]':
        return self.__class__(items)

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New collection with filtered items
        """
        return self._derive([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items using keyword arguments (attribute matching).
        All conditions must match (AND logic).

        Examples:
            # Find thresholds of one runway
            thresholds.where(runway_key=42)
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def all(self) -> List[T]:
        """Return all items as a list."""
        return self._items

    def count(self) -> int:
        """Return the count of items in the collection."""
        return len(self._items)

    def exists(self) -> bool:
        """Return True if the collection has any items."""
        return len(self._items) > 0

    def group_by(self, key_func: Callable[[T], Any]) -> Dict[Any, List[T]]:
        """
        Group items by a key function, keeping feed order inside each group.

        Args:
            key_func: Function that returns the grouping key for an item

        Returns:
            Dictionary mapping keys to lists of items
        """
        groups: Dict[Any, List[T]] = {}
        for item in self._items:
            groups.setdefault(key_func(item), []).append(item)
        return groups

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._items)} items)"


class FeatureCollection(QueryableCollection[T]):
    """Ordered records of a single FeatureKind."""

    def __init__(self, kind: FeatureKind, items: Union[List[T], Iterable[T]] = ()):
        super().__init__(items)
        self.kind = kind

    def _derive(self, items: List[T]) -> 'FeatureCollection[T]':
        return FeatureCollection(self.kind, items)

    @classmethod
    def from_geojson(cls, kind: FeatureKind, document: Any) -> 'FeatureCollection':
        """
        Decode a GeoJSON FeatureCollection document.

        Every feature is decoded; errors are gathered for all of them before
        failing, and no partial collection is ever returned.

        Args:
            kind: Layer the document was fetched from
            document: Parsed JSON document

        Returns:
            FeatureCollection with one record per feature, in document order

        Raises:
            ModelValidationError: If the document or any of its features is malformed
        """
        if not isinstance(document, dict) or not isinstance(document.get('features'), list):
            raise ModelValidationError(
                f"{kind.typename}: response is not a feature collection",
                ValidationResult.error('features', 'expected a list of features'),
            )

        result = ValidationResult()
        records = []
        for index, feature in enumerate(document['features']):
            if not isinstance(feature, dict) or 'properties' not in feature:
                result.add_error(f"features[{index}]", "feature has no properties")
                continue
            try:
                records.append(decode_feature(kind, feature['properties']))
            except FeatureDecodeError as e:
                result.add_error(f"features[{index}].{e.field}", str(e), e.value)

        if not result.is_valid:
            raise ModelValidationError(
                f"{kind.typename}: {len(result.errors)} of {len(document['features'])} features could not be decoded",
                result,
            )

        logger.debug(f"Decoded {len(records)} {kind.token} features")
        return cls(kind, records)

    def __repr__(self) -> str:
        return f"FeatureCollection({self.kind.token}, {len(self._items)} items)"
