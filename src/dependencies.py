from fastapi import Depends

from src.config.settings import Settings, get_settings
from src.protocols.document_store_protocol import DocumentStoreProtocol
from src.services import SearchService, create_document_store_from_settings


# A fresh store per request; nothing is shared between searches
def get_document_store(
    settings: Settings = Depends(get_settings),
) -> DocumentStoreProtocol:
    return create_document_store_from_settings(settings)


def get_search_service(
    store: DocumentStoreProtocol = Depends(get_document_store),
    settings: Settings = Depends(get_settings),
) -> SearchService:
    return SearchService(
        store=store,
        extension=settings.DOCUMENT_EXTENSION,
        isolate_failures=settings.ISOLATE_FETCH_FAILURES,
    )
