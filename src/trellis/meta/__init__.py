"""Static page metadata extraction.

Reads route overrides declared with ``definePageMeta({...})`` in a page's
``<script>`` block without executing any of it.
"""

from trellis.meta.cache import LRUMetaCache, MetaCache, create_cache
from trellis.meta.extractor import META_KEYS, MetaExtractor
from trellis.meta.parser import ScriptParser, TypeScriptParser
from trellis.meta.script import extract_script_content
from trellis.meta.types import RouteMeta

__all__ = [
    "META_KEYS",
    "LRUMetaCache",
    "MetaCache",
    "MetaExtractor",
    "RouteMeta",
    "ScriptParser",
    "TypeScriptParser",
    "create_cache",
    "extract_script_content",
]
