"""Infrastructure layer - boundary implementations and wiring.

Persistence, external service clients, the port registry and the per-module
service providers. Together with views, middleware and tasks this is the
only code that imports Flask, Redis, requests or Celery.
"""
