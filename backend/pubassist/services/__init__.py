# Services package init
"""
Publication Assistant Backend - Services Layer
===============================================

What:  Resource controllers' business logic, between the routes (HTTP) and
       the repositories (persistence).
How:   Stateless singletons; every call receives the request's AsyncSession.

Service Inventory:
    - ResourceService (generic): get_all, get_by_id, search, add, update, delete
    - JournalService:   + get_by_issn, get_by_eissn
    - FacultyService
    - InstituteService: + faculty resolution, get_institutes_in_faculty
    - DivisionService:  + institute resolution, get_divisions_in_institute
"""
