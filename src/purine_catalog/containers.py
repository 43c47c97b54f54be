"""Dependency container wiring for the application."""

from dataclasses import dataclass

from purine_catalog.adapters.json_catalog_store import JsonCatalogStore
from purine_catalog.adapters.local_file_system import LocalFileSystem
from purine_catalog.adapters.openai_ranking_client import OpenAIRankingClient
from purine_catalog.config import Settings
from purine_catalog.domain.catalog import Catalog
from purine_catalog.services.ingestion import IngestionService
from purine_catalog.services.search import CatalogSearchService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: Catalog
    search_service: CatalogSearchService


def build_ingestion_service(settings: Settings) -> IngestionService:
    """Create the ingestion service for the configured paths."""
    return IngestionService(
        file_system=LocalFileSystem(),
        writer=JsonCatalogStore(settings.catalog_output_file),
        data_dir=settings.catalog_data_dir,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog = JsonCatalogStore(resolved_settings.catalog_output_file).load()
    ranking_client = None
    if resolved_settings.openai_api_key:
        ranking_client = OpenAIRankingClient.create(
            api_key=resolved_settings.openai_api_key,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
        )
    search_service = CatalogSearchService(
        catalog=catalog,
        ranking_client=ranking_client,
        limit=resolved_settings.search_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        search_service=search_service,
    )
