# Routes package init
"""
Community Garden Backend — Routes Package
==========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - plots.py:   GET  /plots                 (list page)
                  GET  /plots/new             (blank form)
                  GET  /plots/{id}/edit       (form for an existing plot)
                  POST /plots/save            (create or update, then redirect)
    - health.py:  GET  /health                (database probe)

Design Principle:
    Routes are THIN: bind request data, call a service, render or redirect.
"""
