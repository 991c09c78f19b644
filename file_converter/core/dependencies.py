from functools import lru_cache

from file_converter.core.config import settings
from file_converter.services.conversion_service import ConversionService

@lru_cache
def get_conversion_service() -> ConversionService:
    return ConversionService(settings.completion_settings())
