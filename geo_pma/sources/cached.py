from abc import ABC
import json
import os
from datetime import datetime
from typing import Any, Optional, Tuple, Union
from pathlib import Path
import inspect
import logging

logger = logging.getLogger(__name__)


class CachedSource(ABC):
    """
    Base class for sources that implement caching.

    This class provides a JSON caching mechanism for data sources. It handles:
    - Caching fetched documents to disk
    - Checking cache validity based on age
    - Automatically fetching and caching new data when needed

    Caching is disabled when no cache directory is given: every request
    is fetched and nothing is written to disk.

    Key Format:
    The cache key follows the format `{base_key}_{parameter}` where
    `base_key` must correspond to a fetch method in the implementing class.
    For example, the key 'features_airport' requires a method named
    'fetch_features' that takes the parameter 'airport'.
    """

    def __init__(self, cache_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the cached source.

        Args:
            cache_dir: Base directory for caching, or None to disable caching
        """
        self.source_name = self.__class__.__name__.lower()
        self.cache_path: Optional[Path] = None
        if cache_dir is not None:
            self.cache_path = Path(cache_dir) / self.source_name
            self.cache_path.mkdir(parents=True, exist_ok=True)
        self._force_refresh = False
        self._never_refresh = False

    @property
    def caching_enabled(self) -> bool:
        return self.cache_path is not None

    def set_force_refresh(self, force_refresh: bool = True) -> None:
        """
        Set whether to force refresh of cached data.

        Args:
            force_refresh: Whether to force refresh of cached data
        """
        self._force_refresh = force_refresh

    def set_never_refresh(self, never_refresh: bool = True) -> None:
        """
        Set whether to never refresh cached data.
        If set to True, will use cached data if it exists, regardless of age.

        Args:
            never_refresh: Whether to never refresh cached data
        """
        self._never_refresh = never_refresh

    def _get_cache_file(self, key: str) -> Path:
        """Get the cache file path for a given key."""
        return self.cache_path / f"{key}.json"

    def _is_cache_valid(self, cache_file: Path, max_age_days: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """
        Check if the cache file is valid (exists and not too old).

        Args:
            cache_file: Path to the cache file
            max_age_days: Maximum age of cache in days (None for no limit)

        Returns:
            Tuple[bool, Optional[str]]: (is_valid, reason if invalid)
        """
        if self._force_refresh:
            return False, "force refresh"
        if not cache_file.exists():
            return False, "missing"
        if self._never_refresh:
            return True, None
        if max_age_days is None:
            return True, None
        file_age = datetime.now() - datetime.fromtimestamp(cache_file.stat().st_mtime)
        if file_age.days <= max_age_days:
            return True, None
        return False, "expired"

    def _save_to_cache(self, data: Any, key: str) -> None:
        # Written next to the target and moved in place, so an interrupted
        # run never leaves a truncated entry behind.
        cache_file = self._get_cache_file(key)
        tmp_file = cache_file.with_name(f"{cache_file.name}.tmp")
        try:
            with open(tmp_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_file, cache_file)
        finally:
            if tmp_file.exists():
                tmp_file.unlink()

    def _load_from_cache(self, key: str) -> Any:
        cache_file = self._get_cache_file(key)
        with open(cache_file, 'r', encoding='utf-8') as f:
            return json.load(f)

    def invalidate(self, key: str, param: str) -> None:
        """Remove a cached entry so the next request fetches it again."""
        if not self.caching_enabled:
            return
        cache_file = self._get_cache_file(f"{key}_{param}")
        if cache_file.exists():
            cache_file.unlink()
            logger.info(f"Removed {cache_file.name} from cache {self.source_name}")

    def _validate_fetch_method(self, base_key: str) -> None:
        """
        Validate that the fetch method exists for the given base key.

        Raises:
            NotImplementedError: If the fetch method doesn't exist
        """
        method_name = f"fetch_{base_key}"
        if not hasattr(self, method_name):
            raise NotImplementedError(
                f"No fetch method found for key '{base_key}'. "
                f"Class {self.__class__.__name__} must implement a method named '{method_name}'."
            )

    def get_data(self, key: str, param: str, max_age_days: Optional[int] = None, **kwargs) -> Any:
        """
        Get data from cache or fetch it if not available.

        Args:
            key: Base key for the data type (e.g., 'features')
            param: Parameter to pass to the fetch method (ignored if fetch method takes no arguments)
            max_age_days: Maximum age of cache in days (None for no limit)
            **kwargs: Additional arguments to pass to the fetch method

        Returns:
            The requested data

        Raises:
            NotImplementedError: If the fetch method doesn't exist
        """
        cache_key = f"{key}_{param}"
        reason = "no cache"
        if self.caching_enabled:
            cache_file = self._get_cache_file(cache_key)
            is_valid, reason = self._is_cache_valid(cache_file, max_age_days)
            if is_valid:
                try:
                    data = self._load_from_cache(cache_key)
                except ValueError as e:
                    logger.warning(f"Discarding unreadable {cache_file.name} from cache {self.source_name}: {e}")
                    cache_file.unlink()
                    reason = "unreadable"
                else:
                    logger.info(f"{cache_file.name} retrieved from cache {self.source_name}")
                    return data

        self._validate_fetch_method(key)
        fetch_method = getattr(self, f"fetch_{key}")

        sig = inspect.signature(fetch_method)
        if len(sig.parameters) == 0:
            data = fetch_method()
        else:
            data = fetch_method(param, **kwargs)

        if self.caching_enabled:
            self._save_to_cache(data, cache_key)
        logger.info(f"{cache_key} [{reason}] fetched using {fetch_method.__name__}")

        return data
