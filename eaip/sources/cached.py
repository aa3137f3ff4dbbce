import json
import inspect
import logging
from abc import ABC
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)


class CachedSource(ABC):
    """
    Base class for sources that cache fetched data on disk.

    Data is fetched by a method named `fetch_<key>` on the implementing class
    and stored under `<cache_dir>/<source name>/<key>_<parameter>.<ext>`.
    For example, with key 'page' the class must implement `fetch_page(param)`.

    Supported extensions are 'html' (stored as UTF-8 text) and 'json'.
    Without a cache directory, every call fetches.
    """

    def __init__(self, cache_dir: Optional[str] = None):
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

    def set_force_refresh(self, force_refresh: bool = True) -> None:
        """Set whether to ignore cached data and always fetch."""
        self._force_refresh = force_refresh

    def set_never_refresh(self, never_refresh: bool = True) -> None:
        """Set whether to use cached data whenever it exists, regardless of age."""
        self._never_refresh = never_refresh

    def _get_cache_file(self, key: str, ext: str) -> Path:
        return self.cache_path / f"{key}.{ext}"

    def _is_cache_valid(self, cache_file: Path, max_age_days: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """
        Check if the cache file is valid (exists and not too old).

        Returns:
            Tuple[bool, Optional[str]]: (is_valid, reason if invalid)
        """
        if self._force_refresh:
            return False, "force refresh"
        if not cache_file.exists():
            return False, "missing"
        if self._never_refresh or max_age_days is None:
            return True, None
        file_age = datetime.now() - datetime.fromtimestamp(cache_file.stat().st_mtime)
        if file_age.days <= max_age_days:
            return True, None
        return False, "expired"

    def _save_to_cache(self, data: Any, key: str, ext: str) -> None:
        cache_file = self._get_cache_file(key, ext)
        if ext == 'json':
            with open(cache_file, 'w', encoding='utf-8') as f:
                json.dump(data, f)
        elif ext == 'html':
            with open(cache_file, 'w', encoding='utf-8') as f:
                f.write(data)
        else:
            raise ValueError(f"Unsupported file extension: {ext}")

    def _load_from_cache(self, key: str, ext: str) -> Any:
        cache_file = self._get_cache_file(key, ext)
        if ext == 'json':
            with open(cache_file, 'r', encoding='utf-8') as f:
                return json.load(f)
        elif ext == 'html':
            with open(cache_file, 'r', encoding='utf-8') as f:
                return f.read()
        else:
            raise ValueError(f"Unsupported file extension: {ext}")

    def _get_fetch_method(self, base_key: str):
        method = getattr(self, f"fetch_{base_key}", None)
        if method is None:
            raise NotImplementedError(
                f"No fetch method found for key '{base_key}'. "
                f"Class {self.__class__.__name__} must implement a method named 'fetch_{base_key}'."
            )
        return method

    def get_data(self, key: str, ext: str, param: str, cache_param: Optional[str] = None,
                 max_age_days: Optional[int] = None, **kwargs) -> Any:
        """
        Get data from cache or fetch it if not available.

        Args:
            key: Base key for the data type (e.g., 'page')
            ext: File extension (html or json)
            param: Parameter to pass to the fetch method
            cache_param: Optional parameter to use in the cache key (if None, uses param)
            max_age_days: Maximum age of cache in days (None for no limit)
            **kwargs: Additional arguments to pass to the fetch method

        Raises:
            NotImplementedError: If the fetch method doesn't exist
            ValueError: If the file extension is not supported
        """
        fetch_method = self._get_fetch_method(key)

        if self.cache_path is None:
            return self._call_fetch(fetch_method, param, **kwargs)

        cache_key = f"{key}_{cache_param if cache_param is not None else param}"
        cache_file = self._get_cache_file(cache_key, ext)

        is_valid, reason = self._is_cache_valid(cache_file, max_age_days)
        if is_valid:
            logger.info(f"{cache_file.name} retrieved from cache {self.source_name}")
            return self._load_from_cache(cache_key, ext)

        data = self._call_fetch(fetch_method, param, **kwargs)
        self._save_to_cache(data, cache_key, ext)
        logger.info(f"{cache_file.name} [{reason}] fetched using {fetch_method.__name__}")
        return data

    @staticmethod
    def _call_fetch(fetch_method, param: str, **kwargs) -> Any:
        if len(inspect.signature(fetch_method).parameters) == 0:
            return fetch_method()
        return fetch_method(param, **kwargs)
