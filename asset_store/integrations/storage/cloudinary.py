import os
import posixpath
import tempfile
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Union
from urllib.parse import urlparse

import requests

from .base import StorageAdapter
from .client import AssetApi, AssetUploader, CloudinaryClient
from .errors import translate_error
from .paths import compute_extension, compute_path, compute_resource_type
from asset_store.utils.logger import null_logger

PAGE_SIZE = 200


def parse_timestamp(value: str) -> int:
    """
    Converts a Cloudinary timestamp such as '2018-01-21T09:21:16Z' to a unix epoch.
    Timestamps without an offset are taken as UTC.
    """
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())


def listed_key(item: Dict[str, Any]) -> str:
    """
    Rebuilds the logical key of a listed asset.

    Images and videos report their format. Raw assets do not, so their extension
    comes from the context saved by CloudinaryAdapter.write, or failing that from
    the last segment of the delivery URL.
    """
    public_id = item["public_id"]
    extension = item.get("format")
    if not extension:
        extension = ((item.get("context") or {}).get("custom") or {}).get("extension")
    if not extension and item.get("url"):
        url_name = posixpath.basename(urlparse(item["url"]).path)
        # raw uploads named after their file already end in the extension
        if url_name != posixpath.basename(public_id):
            extension = posixpath.splitext(url_name)[1].lstrip(".")
    return f"{public_id}.{extension}" if extension else public_id


class CloudinaryAdapter(StorageAdapter):
    """
    Storage adapter for Cloudinary.
    Exposes a Cloudinary media library through the key-addressed filesystem contract.

    Logical keys map to public ids by dropping the final extension
    ("a/b/photo.jpg" is stored as "a/b/photo"), and the resource type is inferred
    from that extension. Remote and IO errors are logged and returned as False
    (or an empty list); only configuration errors raise.
    """

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        cafile: Optional[str] = None,
        api: Optional[AssetApi] = None,
        uploader: Optional[AssetUploader] = None,
        listing_resource_types: Iterable[str] = ("image",),
    ):
        """
        Args:
            cloud_name (str): The Cloudinary cloud name.
            api_key (str): The Cloudinary API key.
            api_secret (str): The Cloudinary API secret.
            cafile (str, optional): CA bundle used to verify TLS when reading content.
                When set, reads go through the asset's secure_url.
            api (AssetApi, optional): Lookup/listing client. Defaults to a CloudinaryClient.
            uploader (AssetUploader, optional): Upload/destroy/rename client. Defaults to
                the same CloudinaryClient.
            listing_resource_types (Iterable[str]): Resource types enumerated by keys().
                Only images are listed unless told otherwise.

        Raises:
            ValueError: If a credential is missing.
        """
        self.cafile = cafile
        self.client = CloudinaryClient(cloud_name, api_key, api_secret)
        self.api = api or self.client
        self.uploader = uploader or self.client
        self.listing_resource_types = tuple(listing_resource_types)
        self.logger = null_logger

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "CloudinaryAdapter":
        return cls(
            settings.cloud_name,
            settings.api_key,
            settings.api_secret,
            cafile=settings.cafile,
            **kwargs,
        )

    def set_logger(self, logger) -> None:
        self.logger = logger

    def _report(self, operation: str, key: str, exc: Exception) -> None:
        error = translate_error(exc, key)
        self.logger.error(f"Cloudinary {operation} failed for '{key}': {error.__class__.__name__}: {error}")

    def describe(self, key: str) -> Dict[str, Any]:
        """
        Looks up the Cloudinary descriptor of the asset stored under a key.

        Unlike the filesystem operations this raises, so callers can tell a
        missing asset from a transport problem.

        Raises:
            ResourceNotFound: If no asset exists for the key.
            AccessDenied: If the credentials are rejected.
            RemoteServiceError: For any other Cloudinary API error.
            AssetStoreError: For anything else.
        """
        try:
            return self.api.resource(compute_path(key), resource_type=compute_resource_type(key))
        except Exception as e:
            raise translate_error(e, key) from e

    def read(self, key: str) -> Union[bytes, bool]:
        if self.cafile is not None:
            url_field, verify = "secure_url", self.cafile
        else:
            url_field, verify = "url", True

        try:
            resource = self.describe(key)
            response = requests.get(resource[url_field], verify=verify)
            response.raise_for_status()
            return response.content
        except Exception as e:
            self._report("read", key, e)
            return False

    def write(self, key: str, content: Union[bytes, str]) -> Union[int, bool]:
        if isinstance(content, str):
            content = content.encode("utf-8")

        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix="cloudinary-")
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            options = {"resource_type": "auto", "public_id": compute_path(key)}
            extension = compute_extension(key)
            if extension:
                options["context"] = {"extension": extension}
            response = self.uploader.upload(tmp_path, **options)
            return response["bytes"]
        except Exception as e:
            self._report("write", key, e)
            return False
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)

    def exists(self, key: str) -> bool:
        try:
            self.describe(key)
            return True
        except Exception as e:
            self._report("exists", key, e)
            return False

    def keys(self) -> List[str]:
        results = []
        try:
            for resource_type in self.listing_resource_types:
                cursor = None
                while True:
                    options = {"resource_type": resource_type, "max_results": PAGE_SIZE}
                    if resource_type != "image":
                        options["context"] = True
                    if cursor:
                        options["next_cursor"] = cursor
                    page = self.api.resources(**options)

                    results.extend(listed_key(item) for item in page.get("resources", []))

                    cursor = page.get("next_cursor")
                    if not cursor:
                        break
        except Exception as e:
            self._report("keys", "*", e)
            return []
        return results

    def mtime(self, key: str) -> Union[int, bool]:
        try:
            resource = self.describe(key)
            return parse_timestamp(resource["created_at"])
        except Exception as e:
            self._report("mtime", key, e)
            return False

    def delete(self, key: str) -> bool:
        try:
            response = self.uploader.destroy(
                compute_path(key),
                invalidate=True,
                resource_type=compute_resource_type(key),
            )
            result = response.get("result")
        except Exception as e:
            self._report("delete", key, e)
            return False

        if result != "ok":
            self.logger.error(f"Cloudinary delete failed for '{key}': result was {result!r}")
            return False
        return True

    def rename(self, source_key: str, target_key: str) -> bool:
        target_path = compute_path(target_key)
        try:
            response = self.uploader.rename(
                compute_path(source_key),
                target_path,
                invalidate=True,
                resource_type=compute_resource_type(source_key),
            )
            return response.get("public_id") == target_path
        except Exception as e:
            self._report("rename", source_key, e)
            return False

    def is_directory(self, key: str) -> bool:
        prefix = compute_path(key).rstrip("/") + "/"
        try:
            page = self.api.resources(type="upload", prefix=prefix)
            return len(page.get("resources", [])) > 0
        except Exception as e:
            self._report("is_directory", key, e)
            return False
