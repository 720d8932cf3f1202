"""
Web presentation layer for Vigil.

Architectural Intent:
- Thin HTTP surface for cluster event ingestion and alert batches
- Uses Python stdlib only (http.server + asyncio)
"""
