from typing import Any, Dict, Optional

from asset_store.core.config_loader import CloudinarySettings, load_raw_config
from asset_store.utils.logger import logger as package_logger
from .cloudinary import CloudinaryAdapter


def create_storage_adapter(raw_config: Optional[Dict[str, Any]] = None, logger=None, **adapter_options) -> CloudinaryAdapter:
    """
    Builds a CloudinaryAdapter from configuration.

    Args:
        raw_config (dict, optional): Lowercased configuration, as returned by
            load_raw_config(). Loaded from config.yaml and the environment when omitted.
        logger (optional): Logger attached to the adapter. The adapter keeps its
            discard logger when none is given.
        **adapter_options: Passed through to CloudinaryAdapter (api, uploader,
            listing_resource_types).

    Returns:
        CloudinaryAdapter: A ready adapter.

    Raises:
        pydantic.ValidationError: If the Cloudinary credentials are missing.
    """
    if raw_config is None:
        raw_config = load_raw_config()

    settings = CloudinarySettings.from_raw_config(raw_config)
    adapter = CloudinaryAdapter.from_settings(settings, **adapter_options)
    if logger is not None:
        adapter.set_logger(logger)

    package_logger.info(
        f"Cloudinary storage adapter initialized for cloud '{settings.cloud_name}' "
        f"(TLS CA file: {settings.cafile or 'system default'})."
    )
    return adapter
