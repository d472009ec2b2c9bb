"""HTTP header names and request-timing thresholds."""

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Log requests slower than this many seconds
SLOW_REQUEST_THRESHOLD = 1.0
