from abc import ABC, abstractmethod
from typing import Any, Dict

from cloudinary import api as cloudinary_api
from cloudinary import uploader as cloudinary_uploader


class AssetApi(ABC):
    """
    Read side of the remote asset-management API: lookups and listings.
    """

    @abstractmethod
    def resource(self, public_id: str, **options) -> Dict[str, Any]:
        """
        Fetches the descriptor of a single asset.

        Args:
            public_id (str): The public id of the asset.
            **options: Extra lookup options, e.g. resource_type='raw'.

        Returns:
            dict: The asset descriptor (secure_url, url, bytes, created_at, ...).

        Raises:
            Exception: If the asset does not exist or the call fails.
        """
        pass

    @abstractmethod
    def resources(self, **options) -> Dict[str, Any]:
        """
        Lists one page of assets.

        Args:
            **options: Listing options (resource_type, type, prefix, max_results, next_cursor).

        Returns:
            dict: A page with a 'resources' list and, when more pages exist, a 'next_cursor'.
        """
        pass


class AssetUploader(ABC):
    """
    Write side of the remote asset-management API: upload, destroy and rename.
    """

    @abstractmethod
    def upload(self, file_path: str, **options) -> Dict[str, Any]:
        pass

    @abstractmethod
    def destroy(self, public_id: str, **options) -> Dict[str, Any]:
        pass

    @abstractmethod
    def rename(self, from_public_id: str, to_public_id: str, **options) -> Dict[str, Any]:
        pass


class CloudinaryClient(AssetApi, AssetUploader):
    """
    Cloudinary API client bound to one set of credentials.

    Credentials travel with every call as SDK options instead of going through
    cloudinary.config(), so clients for different accounts can live side by side.
    """

    def __init__(self, cloud_name: str, api_key: str, api_secret: str):
        if not all([cloud_name, api_key, api_secret]):
            raise ValueError("Cloudinary cloud name and credentials must be configured.")

        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret

    def _options(self, options: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(options)
        merged.update(
            cloud_name=self.cloud_name,
            api_key=self.api_key,
            api_secret=self.api_secret,
        )
        return merged

    def resource(self, public_id: str, **options) -> Dict[str, Any]:
        return cloudinary_api.resource(public_id, **self._options(options))

    def resources(self, **options) -> Dict[str, Any]:
        return cloudinary_api.resources(**self._options(options))

    def upload(self, file_path: str, **options) -> Dict[str, Any]:
        return cloudinary_uploader.upload(file_path, **self._options(options))

    def destroy(self, public_id: str, **options) -> Dict[str, Any]:
        return cloudinary_uploader.destroy(public_id, **self._options(options))

    def rename(self, from_public_id: str, to_public_id: str, **options) -> Dict[str, Any]:
        return cloudinary_uploader.rename(from_public_id, to_public_id, **self._options(options))
