# Middleware package init
"""
MangoNote Backend - Middleware Package
========================================

Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request -> [Request ID] -> [Logging] -> [GZip] -> [CORS] -> Route Handler

    1. Request ID: correlation id for every log line of the request
    2. Logging: access record with status and duration
    3. GZip / CORS: provided by Starlette/FastAPI
"""
