# Middleware package init
"""
Scatter-Brain Backend — Middleware Package
===========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Router

    Request ID runs first so the logging middleware and the error handlers
    can both read the id from request_id_var.
"""
