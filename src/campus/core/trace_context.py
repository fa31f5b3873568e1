"""Trace id context variable for logging"""

import contextvars

# Current request's trace_id, None outside a request
trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "trace_id", default=None
)
