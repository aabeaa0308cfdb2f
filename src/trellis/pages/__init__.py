"""Pages directories: scanning and route generation sessions.

Usage::

    config = TrellisConfig(pages_dirs=("pages",), extract_meta=True)
    routes = await resolve_pages_routes(config)

Conventions:

    pages/
      index.vue              # /
      about.vue              # /about
      users.vue              # /users (layout for users/*)
      users/
        index.vue            # /users        (child path "")
        [id].vue             # /users/:id()
      [[lang]]/docs.vue      # /:lang?/docs
      [...slug].vue          # /:slug(.*)*
"""

from trellis.pages.discovery import locale_sort_key, scan_pages, unique_by_relative_path
from trellis.pages.resolve import create_extractor, resolve_pages_routes, unique_by_path

__all__ = [
    "create_extractor",
    "locale_sort_key",
    "resolve_pages_routes",
    "scan_pages",
    "unique_by_path",
    "unique_by_relative_path",
]
