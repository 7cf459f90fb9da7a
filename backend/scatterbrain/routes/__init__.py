# Routes package init
"""
Scatter-Brain Backend — API Routes Package
===========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - ping.py:      GET  /api/ping                (liveness)
    - thoughts.py:  POST /api/thoughts            (create)
                    GET  /api/thoughts            (list)
                    GET  /api/thoughts/{id}       (get)
                    PUT  /api/thoughts/{id}       (replace)

Any other path falls through to the static file mount registered in main.py.
"""
