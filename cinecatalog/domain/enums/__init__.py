from cinecatalog.domain.enums.storage_type import StorageType
__all__ = [
    "StorageType",
]
