"""
FastAPI routers grouped by area (products, orders, health).

Each module exposes an APIRouter that the application mounts under the
configured API prefix. Handlers catch their own failures and answer with a
``{"error": "..."}`` body.
"""
