"""AWS Secrets Manager integration for model credentials."""
import json
import logging
from typing import Dict

import boto3
from botocore.exceptions import ClientError

from pricetag.app.settings import Settings

logger = logging.getLogger(__name__)

# Secret keys (as stored in the secret's JSON) mapped to Settings fields
SECRET_FIELDS = {
    "GEMINI_API_KEY": "gemini_api_key",
    "OPENAI_API_KEY": "openai_api_key",
    "LANGSMITH_API_KEY": "langsmith_api_key",
}


def fetch_secrets(secret_name: str, region: str) -> Dict[str, str]:
    """Read a JSON secret from Secrets Manager."""
    session = boto3.Session(region_name=region)
    client = session.client("secretsmanager")
    response = client.get_secret_value(SecretId=secret_name)
    return json.loads(response.get("SecretString", "{}"))


def load_secrets(settings: Settings) -> Settings:
    """Fill credentials missing from the environment from Secrets Manager.

    Only runs when ``secrets_manager_secret_name`` is configured. Values already
    present on ``settings`` win. Failures are logged and leave the credentials
    unset, so the request later fails with a configuration error.
    """
    if not settings.secrets_manager_secret_name:
        return settings
    missing = [name for name, field in SECRET_FIELDS.items() if not getattr(settings, field)]
    if not missing:
        return settings

    try:
        secrets = fetch_secrets(settings.secrets_manager_secret_name, settings.aws_region)
    except ClientError as e:
        logger.error("Failed to load secrets from Secrets Manager: %s", e)
        return settings
    except Exception as e:  # noqa: BLE001
        logger.exception("Unexpected error loading secrets: %s", e)
        return settings

    updates = {}
    for name in missing:
        value = secrets.get(name)
        if value:
            updates[SECRET_FIELDS[name]] = value
            logger.info("Loaded %s from Secrets Manager", name)
    if not updates:
        return settings
    return settings.model_copy(update=updates)
