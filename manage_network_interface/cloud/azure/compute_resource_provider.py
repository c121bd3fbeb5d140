import logging

from azure.core.credentials import TokenCredential
from azure.mgmt.compute import ComputeManagementClient
from azure.mgmt.compute.models import VirtualMachine

logger = logging.getLogger(__name__)


class ComputeResourceProvider:
    subscription_id: str
    compute_client: ComputeManagementClient

    def __init__(self, subscription_id: str, credentials: TokenCredential):
        self.subscription_id = subscription_id
        self.compute_client = ComputeManagementClient(credentials, subscription_id)

    def put_vm(self, resource_group_name: str, vm_name: str, vm: VirtualMachine) -> VirtualMachine:
        logger.debug("PUTting VM: {}".format(vm_name))
        poller = self.compute_client.virtual_machines.begin_create_or_update(resource_group_name, vm_name, vm)
        result = poller.result()
        logger.debug("VM PUT Done")

        return result

    def delete_vm(self, resource_group_name: str, vm_name: str):
        logger.debug("DELETEing VM: {}/{}".format(resource_group_name, vm_name))
        poller = self.compute_client.virtual_machines.begin_delete(resource_group_name, vm_name)
        poller.result()
        logger.debug("VM DELETE Done")
