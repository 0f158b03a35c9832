# Middleware package init
"""
IdeaBoard Backend: Middleware Package
=======================================

Middleware Chain (request order):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

Request ID runs first so the access log line can carry the id.
"""
