"""Common literal values used across folio_pages.

These constants keep filenames, storage keys, and placeholder values
centralized so loaders, templates, and tests can import the same values
without drifting. Intended for internal use within the folio_pages package.

Examples
--------
>>> from folio_pages import _constants
>>> _constants.THEME_STORAGE_KEY
'theme'
>>> _constants.POST_PAGE_TEMPLATE.format(slug="hello-world")
'blog/hello-world.html'
"""

SITE_CONFIG_FILENAME = "site.toml"
PROJECTS_CONFIG_FILENAME = "projects.toml"
STATIC_DIRNAME = "static"
DEFAULT_CONTENT_DIR = "content/blog"
DEFAULT_OUTPUT_DIR = "public"

THEME_STORAGE_KEY = "theme"
DARK_CLASS = "dark"

UNTITLED_POST = "Untitled Post"
POST_NOT_FOUND = "Post not found"
POST_PAGE_TEMPLATE = "blog/{slug}.html"
