import copy
import logging
import time
from typing import Optional

from manage_network_interface.cloud.cloud import ICloud, ResourceNotFound
from manage_network_interface.cloud.cloud_factory import CloudFactory
from manage_network_interface.dm.image_reference import ImageReference
from manage_network_interface.dm.network_interface import NetworkInterface
from manage_network_interface.dm.network_interface_ip_configuration import NetworkInterfaceIPConfiguration
from manage_network_interface.dm.network_interface_reference import NetworkInterfaceReference
from manage_network_interface.dm.network_profile import NetworkProfile
from manage_network_interface.dm.os_disk import OSDisk
from manage_network_interface.dm.os_profile import OSProfile
from manage_network_interface.dm.public_ip_address import PublicIPAddress
from manage_network_interface.dm.subnet import Subnet
from manage_network_interface.dm.virtual_network import VirtualNetwork
from manage_network_interface.dm.vm import VM
from manage_network_interface.utils import (
    create_password,
    create_random_name,
    create_username,
    format_network_interface,
    format_vm
)

logger = logging.getLogger(__name__)

VNET_ADDRESS_PREFIX = "172.16.0.0/16"
FRONT_END_SUBNET = Subnet("Front-end", "172.16.1.0/24")
MID_TIER_SUBNET = Subnet("Mid-tier", "172.16.2.0/24")
BACK_END_SUBNET = Subnet("Back-end", "172.16.3.0/24")
IP_CONFIGURATION_NAME = "default-config"
VM_SIZE = "Standard_D2a_v4"
VM_IMAGE = ImageReference("MicrosoftWindowsServer", "WindowsServer", "2012-R2-Datacenter", "latest")


class ResourceNames:
    resource_group: str
    vnet: str
    nic1: str
    nic2: str
    nic3: str
    pip1: str
    pip2: str
    vm: str

    def __init__(self):
        self.resource_group = create_random_name("NetworkSampleRG")
        self.vnet = create_random_name("vnet")
        self.nic1 = create_random_name("nic1-")
        self.nic2 = create_random_name("nic2-")
        self.nic3 = create_random_name("nic3-")
        self.pip1 = create_random_name("pip1-")
        self.pip2 = create_random_name("pip2-")
        self.vm = create_random_name("vm")


class NetworkInterfaceService:
    """
    Creates a VM with multiple network interfaces, reconfigures, lists and deletes
    interfaces, then removes everything by deleting the resource group.
    """
    location: str
    names: ResourceNames
    cloud: ICloud
    resource_group_id: Optional[str]

    def __init__(self, location: str, cloud_factory: CloudFactory, names: ResourceNames = None):
        self.location = location
        self.names = ResourceNames() if names is None else names
        self.cloud = cloud_factory.get_cloud()
        self.resource_group_id = None

    def run(self):
        try:
            self.manage_network_interfaces()
        finally:
            self.clean_up()

    def manage_network_interfaces(self):
        rg_name = self.names.resource_group

        logger.info("Creating resource group...")
        resource_group = self.cloud.create_resource_group(rg_name, self.location)
        self.resource_group_id = resource_group.id
        logger.info("Created a resource group with name: {}".format(resource_group.name))

        logger.info("Creating a virtual network ...")
        vnet = VirtualNetwork(
            self.names.vnet,
            self.location,
            [VNET_ADDRESS_PREFIX],
            [copy.copy(FRONT_END_SUBNET), copy.copy(MID_TIER_SUBNET), copy.copy(BACK_END_SUBNET)]
        )
        logger.debug("Virtual network request: {}".format(vnet.to_json()))
        vnet = self.cloud.create_virtual_network(rg_name, vnet)
        logger.info("Created a virtual network: {}".format(vnet.name))

        pip1 = self.create_public_ip_address(self.names.pip1)
        pip2 = self.create_public_ip_address(self.names.pip2)

        logger.info("Creating multiple network interfaces...")
        nic1 = self.create_network_interface(1, self.names.nic1, vnet.get_subnet(FRONT_END_SUBNET.name).id,
                                             public_ip_address_id=pip1.id, enable_ip_forwarding=True)
        nic2 = self.create_network_interface(2, self.names.nic2, vnet.get_subnet(MID_TIER_SUBNET.name).id)
        nic3 = self.create_network_interface(3, self.names.nic3, vnet.get_subnet(BACK_END_SUBNET.name).id)

        logger.info("Creating a Windows VM")
        t1 = time.monotonic()
        vm = self.build_vm(nic1, [nic2, nic3])
        logger.debug("VM request: {}".format(vm.to_json()))
        vm = self.cloud.create_vm(rg_name, vm)
        t2 = time.monotonic()
        logger.info("Created VM: (took {:.1f} seconds) {}".format(t2 - t1, vm.id))
        logger.info(format_vm(vm))

        logger.info("Updating the first network interface")
        nic1 = self.update_public_ip_address(nic1.name, pip2.id)
        logger.info("Updated the first network interface")
        logger.info(format_network_interface(nic1))

        logger.info("Walking through network interfaces in resource group: {}".format(rg_name))
        self.log_network_interfaces()

        logger.info("Deleting a network interface: {}".format(nic2.id))
        logger.info("First, deleting the vm")
        self.cloud.delete_vm(vm.id)
        logger.info("Second, deleting the network interface")
        self.cloud.delete_network_interface(nic2.id)
        logger.info("Deleted network interface")

        logger.info("============================================================")
        logger.info("Remaining network interfaces are ...")
        self.log_network_interfaces()

    def create_public_ip_address(self, name: str) -> PublicIPAddress:
        logger.info("Creating public IP address: {}".format(name))
        pip = PublicIPAddress(name, self.location, allocation_method="Dynamic", domain_name_label=name)
        logger.debug("Public IP address request: {}".format(pip.to_json()))
        pip = self.cloud.create_public_ip_address(self.names.resource_group, pip)
        logger.info("Created public IP address: {}".format(pip.id))

        return pip

    def create_network_interface(self, index: int, name: str, subnet_id: str, public_ip_address_id: str = None,
                                 enable_ip_forwarding: bool = False) -> NetworkInterface:
        logger.info("Creating network interface {}...".format(index))
        nic = NetworkInterface(
            name,
            self.location,
            [NetworkInterfaceIPConfiguration(
                IP_CONFIGURATION_NAME,
                subnet_id,
                private_ip_allocation_method="Dynamic",
                public_ip_address_id=public_ip_address_id
            )],
            enable_ip_forwarding=enable_ip_forwarding
        )
        logger.debug("Network interface request: {}".format(nic.to_json()))
        nic = self.cloud.create_or_update_network_interface(self.names.resource_group, nic)
        logger.info("Created network interface {}: {}".format(index, nic.name))

        return nic

    def build_vm(self, primary_nic: NetworkInterface, secondary_nics: list[NetworkInterface]) -> VM:
        network_profile = NetworkProfile([NetworkInterfaceReference(primary_nic.id, primary=True)])
        for nic in secondary_nics:
            network_profile.network_interfaces.append(NetworkInterfaceReference(nic.id, primary=False))
        network_profile.validate()

        return VM(
            self.names.vm,
            self.location,
            VM_SIZE,
            VM_IMAGE,
            OSDisk(os_type="Windows", create_option="FromImage", caching="ReadOnly",
                   storage_account_type="Standard_LRS", name=create_random_name("myVMOSdisk")),
            OSProfile(self.names.vm, create_username(), create_password()),
            network_profile
        )

    def update_public_ip_address(self, nic_name: str, public_ip_address_id: str) -> NetworkInterface:
        logger.debug("Pointing {} at public IP {}".format(nic_name, public_ip_address_id))

        return self.cloud.update_network_interface_public_ip(self.names.resource_group, nic_name,
                                                             public_ip_address_id)

    def log_network_interfaces(self):
        for nic in self.cloud.list_network_interfaces(self.names.resource_group):
            logger.info(format_network_interface(nic))

    def clean_up(self):
        if self.resource_group_id is None:
            logger.info("Did not create any resources in Azure. No clean up is necessary")
            return

        try:
            logger.info("Deleting Resource Group...")
            self.cloud.delete_resource_group(self.resource_group_id)
            logger.info("Deleted Resource Group: {}".format(self.names.resource_group))
        except ResourceNotFound:
            logger.info("Resource group {} no longer exists. No clean up is necessary".format(self.resource_group_id))
        except Exception:
            logger.exception("Failed to delete resource group {}".format(self.resource_group_id))
