# Routes package init
"""
Publication Assistant Backend - API Routes Package
===================================================

Route Inventory:
    - journals.py:      /api/Journals (CRUD, ISSN/eISSN lookups, title search)
    - organisation.py:  /api/Faculties, /api/Institutes, /api/Divisions,
                        /api/Faculty/{id}/Institutes, /api/Institute/{id}/Divisions
    - resource.py:      builder for the uniform CRUD endpoint set
    - client.py:        client route-group manifest, navigation shell and deep links
    - health.py:        GET /health

Routes stay thin: extract path/body data, call the service, return DTOs.
Status codes for failures come from the exception handlers in main.py.
"""
