"""pagesort - smart ordering for page-name lists."""

from pagesort.core.config import SortConfig, load_config
from pagesort.core.sorting import smart_sort

__version__ = "0.1.0"

__all__ = ["SortConfig", "load_config", "smart_sort"]
