from abc import abstractmethod
from typing import List

from manage_network_interface.dm.network_interface import NetworkInterface
from manage_network_interface.dm.public_ip_address import PublicIPAddress
from manage_network_interface.dm.resource_group import ResourceGroup
from manage_network_interface.dm.virtual_network import VirtualNetwork
from manage_network_interface.dm.vm import VM


class CloudError(Exception):
    pass


class ResourceNotFound(CloudError):
    resource_id: str

    def __init__(self, resource_id: str, message: str = None):
        super().__init__(message or "Resource {} was not found".format(resource_id))
        self.resource_id = resource_id


class ICloud:
    """
    Lifecycle operations against a cloud control plane.

    Every call blocks until the provider reports the operation as complete and
    returns the resource as the provider sees it, with identifiers filled in.
    """

    def __init__(self, subscription_id: str): pass

    @abstractmethod
    def create_resource_group(self, name: str, location: str) -> ResourceGroup: pass

    @abstractmethod
    def delete_resource_group(self, resource_group_id: str): pass

    @abstractmethod
    def create_virtual_network(self, resource_group_name: str, virtual_network: VirtualNetwork) -> VirtualNetwork: pass

    @abstractmethod
    def create_public_ip_address(self, resource_group_name: str,
                                 public_ip_address: PublicIPAddress) -> PublicIPAddress: pass

    @abstractmethod
    def create_or_update_network_interface(self, resource_group_name: str,
                                           network_interface: NetworkInterface) -> NetworkInterface: pass

    @abstractmethod
    def update_network_interface_public_ip(self, resource_group_name: str, nic_name: str,
                                           public_ip_address_id: str) -> NetworkInterface:
        """
        Fetches the interface, points its first IP configuration at another public IP
        and resubmits it. Every other property is sent back as it was read.
        """

    @abstractmethod
    def list_network_interfaces(self, resource_group_name: str) -> List[NetworkInterface]: pass

    @abstractmethod
    def delete_network_interface(self, network_interface_id: str): pass

    @abstractmethod
    def create_vm(self, resource_group_name: str, vm: VM) -> VM: pass

    @abstractmethod
    def delete_vm(self, vm_id: str): pass
