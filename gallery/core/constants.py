"""Core constants shared by the search core and the HTTP layer."""

import sys

# max_results value meaning "return every matching tag".
MAX_RESULTS_UNBOUNDED = sys.maxsize

# Lowest valid gallery id (legacy galleries use 0).
MIN_GALLERY_ID = 0
