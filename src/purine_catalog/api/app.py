"""FastAPI application factory."""

from fastapi import FastAPI, HTTPException, Request, status

from purine_catalog.app_logging import configure_logging
from purine_catalog.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app serving the read-only catalog."""
    configure_logging()

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods")
    async def list_foods(
        request: Request, query: str | None = None, level: str | None = None
    ) -> dict[str, object]:
        """Search the catalog, optionally filtered by purine level."""
        state_container: AppContainer = request.app.state.container
        foods = await state_container.search_service.search(query, level)
        return {"foods": [food.to_record() for food in foods]}

    @app.get("/foods/{name:path}")
    async def food_detail(name: str, request: Request) -> dict[str, object]:
        """Return a single food by its exact name."""
        state_container: AppContainer = request.app.state.container
        food = state_container.catalog.find(name)
        if food is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return food.to_record()

    @app.get("/categories")
    async def categories(request: Request) -> dict[str, object]:
        """Return item counts per category."""
        state_container: AppContainer = request.app.state.container
        return {"categories": state_container.catalog.category_counts()}

    return app
