# Middleware package init
"""
Publication Assistant Backend - Middleware Package
===================================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation id for logs, error bodies and the response header
    2. Logging: method, path, status and duration, tagged with the request id
    3. GZip / CORS: Starlette middleware configured in main.py
"""
