import logging

from azure.core.credentials import TokenCredential
from azure.mgmt.resource.resources import ResourceManagementClient
from azure.mgmt.resource.resources.models import ResourceGroup

logger = logging.getLogger(__name__)


class ResourceGroupProvider:
    subscription_id: str
    resource_client: ResourceManagementClient

    def __init__(self, subscription_id: str, credentials: TokenCredential):
        self.subscription_id = subscription_id
        self.resource_client = ResourceManagementClient(credentials, subscription_id)

    def put_resource_group(self, resource_group_name: str, location: str) -> ResourceGroup:
        logger.debug("PUTting resource group: /subscriptions/{}/resourceGroups/{}".format(
            self.subscription_id, resource_group_name))
        return self.resource_client.resource_groups.create_or_update(
            resource_group_name, ResourceGroup(location=location))

    def delete_resource_group(self, resource_group_name: str):
        logger.debug("DELETEing resource group: {}".format(resource_group_name))
        poller = self.resource_client.resource_groups.begin_delete(resource_group_name)
        poller.result()
        logger.debug("Resource group DELETE Done")
