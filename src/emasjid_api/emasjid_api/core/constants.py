"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

WILDCARD_QUERY = "*"

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT = "id"
DEFAULT_DIRECTION = "asc"

CADANGAN_DEFAULT_PAGE = 1
CADANGAN_DEFAULT_PAGE_SIZE = 10

MEMBER_SORT_KEYS = ("id", "name")

# page=0 with size=0 means "no paging" for kutipan date-range listings.
KUTIPAN_DEFAULT_PAGE = 0
KUTIPAN_DEFAULT_PAGE_SIZE = 0
