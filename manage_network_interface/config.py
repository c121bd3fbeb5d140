import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LOCATION = "eastus"


@dataclass
class Settings:
    """
    Service principal credentials and target subscription.

    Values are taken as-is. A missing credential is reported by azure-identity
    when the first token is requested, not here.
    """
    client_id: Optional[str]
    client_secret: Optional[str]
    tenant_id: Optional[str]
    subscription_id: Optional[str]
    location: str = DEFAULT_LOCATION

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None, location: str = None):
        environ = os.environ if environ is None else environ

        return Settings(
            client_id=environ.get("CLIENT_ID"),
            client_secret=environ.get("CLIENT_SECRET"),
            tenant_id=environ.get("TENANT_ID"),
            subscription_id=environ.get("SUBSCRIPTION_ID"),
            location=location or environ.get("AZURE_LOCATION") or DEFAULT_LOCATION
        )
