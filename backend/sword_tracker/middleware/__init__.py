# Middleware package init
"""
Sword Tracker Backend: Middleware Package
=========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so every later log line carries the id.
    - Logging sees the final status code and total duration.
"""
