"""HTTP middleware: timeout and request ID.

Applied in the main app; order matters (last added = outermost).
"""

from gallery.middleware.request_id import RequestIDMiddleware
from gallery.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestIDMiddleware", "TimeoutMiddleware"]
