"""
Product catalog subsystem.

Components:
- product_models.py: Product record + validation
- product_service.py: API client with TTL cache and favorites
- http.py: httpx.AsyncClient factory configured from Settings
"""
