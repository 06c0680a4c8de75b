"""
grapheme_width module.

Terminal cell width of a single grapheme cluster.
"""
# re-export the public functions and types from top-level module path, to allow
# 'from grapheme_width import width' rather than 'from grapheme_width.api import width'.

# local
from .api import (width,
                  line_width,
                  cache_info,
                  clear_cache,
                  cached_widths,
                  default_cache,
                  set_max_cache_size)
from .cache import DEFAULT_MAX_CACHE_SIZE, CacheInfo, WidthCache
from .charclass import CharClass, class_of
from .classify import classify

# The __all__ attribute defines the items exported from statement,
# 'from grapheme_width import *', but also to say, "This is the public API".
__all__ = ('width', 'line_width', 'classify', 'class_of', 'CharClass',
           'WidthCache', 'CacheInfo', 'DEFAULT_MAX_CACHE_SIZE',
           'clear_cache', 'set_max_cache_size', 'cache_info',
           'cached_widths', 'default_cache')

__version__ = '0.1.0'
