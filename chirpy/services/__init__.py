# Services package init
"""
Chirpy Backend — Services Layer
================================

Service Inventory:
    - ChirpValidator: length rule and banned-word masking (pure)
    - HitCounter:     thread-safe fileserver hit count
    - UserService:    user store (create, reset)
    - AdminService:   metrics page rendering and the dev-only reset

Services never see HTTP objects; routes adapt requests to them.
"""
