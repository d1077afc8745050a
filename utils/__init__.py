from .cache import CacheStore, FileCache, MemoryCache, make_cache_key
from .batching import pack_fragments
from .text import code_point_length, split_sentences
from .usage import UsageTracker

__all__ = [
    "CacheStore",
    "FileCache",
    "MemoryCache",
    "make_cache_key",
    "pack_fragments",
    "code_point_length",
    "split_sentences",
    "UsageTracker",
]
