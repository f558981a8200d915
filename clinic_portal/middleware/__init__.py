"""HTTP middleware: request timeout and request ID.

Added in main.create_app; RequestIDMiddleware is outermost so the timeout
response carries the request id.
"""

from clinic_portal.middleware.request_id import RequestIDMiddleware
from clinic_portal.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestIDMiddleware", "TimeoutMiddleware"]
