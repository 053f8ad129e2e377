# Middleware package init
"""
Todo API — Middleware Package
===============================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

Request ID runs first so the access log line and error bodies carry it.
"""
