"""Common literal values used across starfu_docs.

These constants keep file names and extension lists centralized so the store,
discovery walker, and tests agree on what counts as content and which
descriptor files are consulted. Intended for internal use within the
starfu_docs package.

Examples
--------
>>> from starfu_docs import _constants
>>> _constants.TOC_FILENAME_TEMPLATE.format(ext=".yaml")
'_toc.yaml'
>>> _constants.CONTENT_EXTENSIONS
('.md', '.mdx')
"""

CONTENT_EXTENSIONS = (".md", ".mdx")
TOC_FILENAME_TEMPLATE = "_toc{ext}"
# Checked in this order; the first descriptor present wins.
TOC_EXTENSIONS = (".yaml", ".yml")
DEFAULT_DOCS_ROOT = "/docs"
