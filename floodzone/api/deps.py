"""FastAPI dependency injection."""

from floodzone.data.lookup import LookupService


def get_lookup_service() -> LookupService:
    return LookupService()
