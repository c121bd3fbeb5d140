from azure.identity import ClientSecretCredential
from manage_network_interface.cloud.azure.azure import Azure
from manage_network_interface.cloud.cloud import ICloud
from manage_network_interface.config import Settings


class CloudFactory:
    settings: Settings

    def __init__(self, settings: Settings):
        self.settings = settings

    def get_cloud(self) -> ICloud:
        credentials = ClientSecretCredential(
            tenant_id=self.settings.tenant_id,
            client_id=self.settings.client_id,
            client_secret=self.settings.client_secret
        )
        cloud = Azure(self.settings.subscription_id, credentials)

        return cloud
