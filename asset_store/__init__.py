"""Cloudinary media library exposed as a key-addressed filesystem adapter."""

from asset_store.integrations.storage import (
    AccessDenied,
    AssetApi,
    AssetStoreError,
    AssetUploader,
    CloudinaryAdapter,
    CloudinaryClient,
    RemoteServiceError,
    ResourceNotFound,
    StorageAdapter,
    TransportError,
    compute_path,
    compute_resource_type,
    create_storage_adapter,
)

__version__ = "0.1.0"
