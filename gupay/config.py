"""Client configuration, optionally read from ``GUPAY_*`` environment variables."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.gupay.co"


class GUPayConfig(BaseSettings):
    api_key: SecretStr  # Secret API key, sent as the Basic credential
    service_id: str  # Service identifier issued by GUPay
    base_url: str = DEFAULT_BASE_URL

    model_config = {"env_prefix": "GUPAY_", "frozen": True}
