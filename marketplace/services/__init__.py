"""
High-level use cases for the marketplace API.

Each service module orchestrates a DocumentStore to implement business
rules (create a listing, check ownership, place an order).

Routers (FastAPI endpoints) call these services instead of manipulating
the stored document directly.
"""
