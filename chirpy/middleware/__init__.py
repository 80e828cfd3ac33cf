# Middleware package init
"""
Chirpy Backend — Middleware Package
====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [Fileserver Hits] → Route / Static files

    1. Request ID first, so every later log line can carry it
    2. Access log measures everything below it and tags /app/ lines with the
       running hit total
    3. Fileserver Hits counts /app/ requests right before they are served
"""
