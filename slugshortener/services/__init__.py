from slugshortener.services.mapping_service import URLMappingService


__all__ = [
    'URLMappingService',
]
