"""HTTP middleware: error handling, rate limiting, metrics."""
