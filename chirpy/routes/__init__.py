# Routes package init
"""
Chirpy Backend — API Routes Package
====================================

Route Inventory:
    - health.py:  GET  /api/healthz          (liveness probe)
    - chirps.py:  POST /api/validate_chirp   (length check + profanity masking)
    - users.py:   POST /api/users            (create user)
    - admin.py:   GET  /admin/metrics        (fileserver hit count page)
                  POST /admin/reset          (dev only: zero hits, delete users)

Static files under /app/ are mounted in main.create_app().

Routes stay thin: decode the request, call a service, shape the response.
Errors are raised, not returned; main.register_exception_handlers maps them.
"""
