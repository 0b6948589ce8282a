# Middleware package init
"""
Community Garden Backend — Middleware Package
==============================================

Middleware Chain:
    ServerErrorMiddleware → [Request Context] → ExceptionMiddleware → Route Handler

    Request Context sets the correlation id before any handler logs, stamps
    X-Request-ID on whatever response passes back through it (including the
    404 and StoreError 500 bodies) and writes the access log line.

    The catch-all Exception handler runs in Starlette's outermost
    ServerErrorMiddleware, outside this chain. It sets X-Request-ID itself.
"""
