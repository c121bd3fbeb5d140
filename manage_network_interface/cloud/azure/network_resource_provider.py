import logging

from azure.core.credentials import TokenCredential
from azure.mgmt.network import NetworkManagementClient
from azure.mgmt.network.models import NetworkInterface, PublicIPAddress, VirtualNetwork

logger = logging.getLogger(__name__)


class NetworkResourceProvider:
    subscription_id: str
    network_client: NetworkManagementClient

    def __init__(self, subscription_id: str, credentials: TokenCredential):
        self.subscription_id = subscription_id
        self.network_client = NetworkManagementClient(credentials, subscription_id)

    def put_vnet(self, resource_group_name: str, vnet_name: str, vnet: VirtualNetwork) -> VirtualNetwork:
        logger.debug("PUTting VNET: {}".format(vnet))
        poller = self.network_client.virtual_networks.begin_create_or_update(resource_group_name, vnet_name, vnet)
        result = poller.result()
        logger.debug("VNET PUT Done")

        return result

    def put_public_ip(self, resource_group_name: str, pip_name: str, pip: PublicIPAddress) -> PublicIPAddress:
        logger.debug("PUTting public IP: {}".format(pip))
        poller = self.network_client.public_ip_addresses.begin_create_or_update(resource_group_name, pip_name, pip)
        result = poller.result()
        logger.debug("Public IP PUT Done")

        return result

    def get_nic(self, resource_group_name: str, nic_name: str) -> NetworkInterface:
        return self.network_client.network_interfaces.get(resource_group_name, nic_name)

    def list_nics(self, resource_group_name: str) -> list[NetworkInterface]:
        return list(self.network_client.network_interfaces.list(resource_group_name))

    def put_nic(self, resource_group_name: str, nic_name: str, nic: NetworkInterface) -> NetworkInterface:
        logger.debug("PUTting NIC: {}".format(nic))
        poller = self.network_client.network_interfaces.begin_create_or_update(resource_group_name, nic_name, nic)
        result = poller.result()
        logger.debug("NIC PUT Done")

        return result

    def delete_nic(self, resource_group_name: str, nic_name: str):
        logger.debug("DELETEing NIC: {}/{}".format(resource_group_name, nic_name))
        poller = self.network_client.network_interfaces.begin_delete(resource_group_name, nic_name)
        poller.result()
        logger.debug("NIC DELETE Done")
