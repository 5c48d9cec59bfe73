from .base import StorageAdapter
from .client import AssetApi, AssetUploader, CloudinaryClient
from .cloudinary import CloudinaryAdapter
from .errors import (
    AccessDenied,
    AssetStoreError,
    RemoteServiceError,
    ResourceNotFound,
    TransportError,
    translate_error,
)
from .manager import create_storage_adapter
from .paths import RESOURCE_TYPES, compute_extension, compute_path, compute_resource_type
