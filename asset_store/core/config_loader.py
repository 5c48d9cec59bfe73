import os
import yaml
from dotenv import load_dotenv
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from asset_store.utils.logger import logger


def load_raw_config(path: str = "config.yaml") -> Dict[str, Any]:
    """
    Loads configuration from a YAML file and .env, then merges them.
    Environment variables override YAML settings. The matching is case-insensitive.
    Returns a dictionary with all keys converted to lowercase for consistent access.
    """
    # Load the .env file into the environment
    load_dotenv()

    config = {}

    # 1. Load base configuration from the YAML file (optional)
    try:
        with open(path, "r") as f:
            yaml_config = yaml.safe_load(f)
            if isinstance(yaml_config, dict):
                config.update({str(k).lower(): v for k, v in yaml_config.items()})
    except FileNotFoundError:
        pass
    except yaml.YAMLError as e:
        logger.warning(f"Could not parse {path}. Error: {e}")

    # 2. Load and override with environment variables
    for key, value in os.environ.items():
        config[key.lower()] = value

    return config


class CloudinarySettings(BaseModel):
    """
    Credentials and TLS settings for one Cloudinary account.
    """
    cloud_name: str = Field(..., min_length=1)
    api_key: str = Field(..., min_length=1)
    api_secret: str = Field(..., min_length=1)
    cafile: Optional[str] = None

    @field_validator("cafile", mode="before")
    @classmethod
    def empty_cafile_is_unset(cls, value):
        if value is None or str(value).strip() == "":
            return None
        return str(value)

    @classmethod
    def from_raw_config(cls, raw_config: Dict[str, Any]) -> "CloudinarySettings":
        """
        Builds settings from a lowercased raw config (see load_raw_config).

        Raises:
            pydantic.ValidationError: If a credential is missing or empty.
        """
        return cls(
            cloud_name=str(raw_config.get("cloudinary_cloud_name") or ""),
            api_key=str(raw_config.get("cloudinary_api_key") or ""),
            api_secret=str(raw_config.get("cloudinary_api_secret") or ""),
            cafile=raw_config.get("cloudinary_cafile"),
        )
