"""
FastAPI routers for the pet catalog.

Each module exposes an APIRouter included by ``petcatalog.app.create_app``;
endpoints call the content resolver stored on ``app.state``.
"""
