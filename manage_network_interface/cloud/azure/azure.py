from azure.core.credentials import TokenCredential
from azure.core.exceptions import ResourceNotFoundError
from azure.mgmt.compute.models import (
    VirtualMachine,
    HardwareProfile,
    StorageProfile,
    OSDisk as AzureOSDisk,
    OSProfile as AzureOSProfile,
    ImageReference as AzureImageReference,
    ManagedDiskParameters,
    NetworkProfile as AzureNetworkProfile,
    NetworkInterfaceReference as AzureNetworkInterfaceReference
)
from azure.mgmt.network.models import (
    AddressSpace,
    NetworkInterface as AzureNetworkInterface,
    NetworkInterfaceIPConfiguration as AzureNetworkInterfaceIPConfiguration,
    PublicIPAddress as AzurePublicIPAddress,
    PublicIPAddressDnsSettings,
    Subnet as AzureSubnet,
    VirtualNetwork as AzureVirtualNetwork
)
from manage_network_interface.cloud.azure.compute_resource_provider import ComputeResourceProvider
from manage_network_interface.cloud.azure.network_resource_provider import NetworkResourceProvider
from manage_network_interface.cloud.azure.resource_group_provider import ResourceGroupProvider
from manage_network_interface.cloud.azure.resource_id import AzureResourceId
from manage_network_interface.cloud.cloud import ICloud, ResourceNotFound
from manage_network_interface.dm.image_reference import ImageReference
from manage_network_interface.dm.network_interface import NetworkInterface
from manage_network_interface.dm.network_interface_ip_configuration import NetworkInterfaceIPConfiguration
from manage_network_interface.dm.network_interface_reference import NetworkInterfaceReference
from manage_network_interface.dm.network_profile import NetworkProfile
from manage_network_interface.dm.os_disk import OSDisk
from manage_network_interface.dm.os_profile import OSProfile
from manage_network_interface.dm.public_ip_address import PublicIPAddress
from manage_network_interface.dm.resource_group import ResourceGroup
from manage_network_interface.dm.subnet import Subnet
from manage_network_interface.dm.virtual_network import VirtualNetwork
from manage_network_interface.dm.vm import VM


class Azure(ICloud):
    subscription_id: str
    rgp: ResourceGroupProvider
    crp: ComputeResourceProvider
    nrp: NetworkResourceProvider
    credentials: TokenCredential

    def __init__(self, subscription_id: str, credentials: TokenCredential):
        self.subscription_id = subscription_id
        self.credentials = credentials
        self.rgp = ResourceGroupProvider(subscription_id, self.credentials)
        self.crp = ComputeResourceProvider(subscription_id, self.credentials)
        self.nrp = NetworkResourceProvider(subscription_id, self.credentials)

    def create_resource_group(self, name: str, location: str) -> ResourceGroup:
        azure_resource_group = self.rgp.put_resource_group(name, location)

        return ResourceGroup(azure_resource_group.name, azure_resource_group.location, azure_resource_group.id)

    def delete_resource_group(self, resource_group_id: str):
        resource_group_name = AzureResourceId.get_resource_name(resource_group_id)
        try:
            self.rgp.delete_resource_group(resource_group_name)
        except ResourceNotFoundError as e:
            raise ResourceNotFound(resource_group_id, str(e)) from e

    def create_virtual_network(self, resource_group_name: str, virtual_network: VirtualNetwork) -> VirtualNetwork:
        azure_vnet = AzureVirtualNetwork(
            location=virtual_network.location,
            address_space=AddressSpace(address_prefixes=list(virtual_network.address_prefixes)),
            subnets=[AzureSubnet(name=subnet.name, address_prefix=subnet.address_prefix)
                     for subnet in virtual_network.subnets]
        )
        azure_vnet = self.nrp.put_vnet(resource_group_name, virtual_network.name, azure_vnet)

        return Azure._to_virtual_network(azure_vnet)

    def create_public_ip_address(self, resource_group_name: str,
                                 public_ip_address: PublicIPAddress) -> PublicIPAddress:
        azure_pip = AzurePublicIPAddress(
            location=public_ip_address.location,
            public_ip_allocation_method=public_ip_address.allocation_method
        )
        if public_ip_address.domain_name_label is not None:
            azure_pip.dns_settings = PublicIPAddressDnsSettings(domain_name_label=public_ip_address.domain_name_label)
        azure_pip = self.nrp.put_public_ip(resource_group_name, public_ip_address.name, azure_pip)

        return Azure._to_public_ip_address(azure_pip)

    def create_or_update_network_interface(self, resource_group_name: str,
                                           network_interface: NetworkInterface) -> NetworkInterface:
        azure_nic = Azure._to_azure_network_interface(network_interface)
        azure_nic = self.nrp.put_nic(resource_group_name, network_interface.name, azure_nic)

        return Azure._to_network_interface(azure_nic)

    def update_network_interface_public_ip(self, resource_group_name: str, nic_name: str,
                                           public_ip_address_id: str) -> NetworkInterface:
        try:
            azure_nic = self.nrp.get_nic(resource_group_name, nic_name)
        except ResourceNotFoundError as e:
            nic_id = AzureResourceId.get_network_interface_id(self.subscription_id, resource_group_name, nic_name)
            raise ResourceNotFound(nic_id, str(e)) from e

        if not azure_nic.ip_configurations:
            raise ValueError("Network interface {} has no IP configuration".format(azure_nic.id))

        # PUT replaces the whole resource, so resubmit the fetched model itself
        azure_nic.ip_configurations[0].public_ip_address = AzurePublicIPAddress(id=public_ip_address_id)
        azure_nic = self.nrp.put_nic(resource_group_name, nic_name, azure_nic)

        return Azure._to_network_interface(azure_nic)

    def list_network_interfaces(self, resource_group_name: str) -> list[NetworkInterface]:
        return [Azure._to_network_interface(azure_nic) for azure_nic in self.nrp.list_nics(resource_group_name)]

    def delete_network_interface(self, network_interface_id: str):
        self.nrp.delete_nic(AzureResourceId.get_resource_group_name(network_interface_id),
                            AzureResourceId.get_resource_name(network_interface_id))

    def create_vm(self, resource_group_name: str, vm: VM) -> VM:
        vm.network_profile.validate()

        azure_vm = VirtualMachine(
            location=vm.location,
            hardware_profile=HardwareProfile(vm_size=vm.size)
        )
        azure_vm.storage_profile = StorageProfile(
            image_reference=AzureImageReference(
                publisher=vm.image.publisher,
                offer=vm.image.offer,
                sku=vm.image.sku,
                version=vm.image.version
            ),
            os_disk=AzureOSDisk(
                create_option=vm.os_disk.create_option,
                os_type=vm.os_disk.os_type,
                name=vm.os_disk.name,
                caching=vm.os_disk.caching,
                managed_disk=ManagedDiskParameters(storage_account_type=vm.os_disk.storage_account_type)
            )
        )
        azure_vm.os_profile = AzureOSProfile(
            computer_name=vm.os_profile.computer_name,
            admin_username=vm.os_profile.admin_username,
            admin_password=vm.os_profile.admin_password
        )
        azure_vm.network_profile = AzureNetworkProfile(network_interfaces=[
            AzureNetworkInterfaceReference(id=nic.id, primary=nic.primary)
            for nic in vm.network_profile.network_interfaces
        ])
        azure_vm = self.crp.put_vm(resource_group_name, vm.name, azure_vm)

        return Azure._to_vm(azure_vm)

    def delete_vm(self, vm_id: str):
        self.crp.delete_vm(AzureResourceId.get_resource_group_name(vm_id),
                           AzureResourceId.get_resource_name(vm_id))

    @classmethod
    def _to_virtual_network(cls, azure_vnet: AzureVirtualNetwork) -> VirtualNetwork:
        address_prefixes = []
        if azure_vnet.address_space is not None and azure_vnet.address_space.address_prefixes is not None:
            address_prefixes = list(azure_vnet.address_space.address_prefixes)

        return VirtualNetwork(
            azure_vnet.name,
            azure_vnet.location,
            address_prefixes,
            [Subnet(subnet.name, subnet.address_prefix, subnet.id) for subnet in azure_vnet.subnets or []],
            azure_vnet.id
        )

    @classmethod
    def _to_public_ip_address(cls, azure_pip: AzurePublicIPAddress) -> PublicIPAddress:
        domain_name_label = None
        if azure_pip.dns_settings is not None:
            domain_name_label = azure_pip.dns_settings.domain_name_label

        return PublicIPAddress(
            azure_pip.name,
            azure_pip.location,
            azure_pip.public_ip_allocation_method,
            domain_name_label,
            azure_pip.ip_address,
            azure_pip.id
        )

    @classmethod
    def _to_azure_network_interface(cls, network_interface: NetworkInterface) -> AzureNetworkInterface:
        azure_ip_configurations = []
        for ip_config in network_interface.ip_configurations:
            azure_ip_config = AzureNetworkInterfaceIPConfiguration(
                name=ip_config.name,
                private_ip_allocation_method=ip_config.private_ip_allocation_method,
                subnet=AzureSubnet(id=ip_config.subnet_id),
                primary=ip_config.primary
            )
            if ip_config.private_ip_address is not None:
                azure_ip_config.private_ip_address = ip_config.private_ip_address
            if ip_config.public_ip_address_id is not None:
                azure_ip_config.public_ip_address = AzurePublicIPAddress(id=ip_config.public_ip_address_id)
            azure_ip_configurations.append(azure_ip_config)

        azure_nic = AzureNetworkInterface(
            location=network_interface.location,
            enable_ip_forwarding=network_interface.enable_ip_forwarding,
            ip_configurations=azure_ip_configurations
        )
        if network_interface.id is not None:
            azure_nic.id = network_interface.id

        return azure_nic

    @classmethod
    def _to_network_interface(cls, azure_nic: AzureNetworkInterface) -> NetworkInterface:
        ip_configurations = []
        for azure_ip_config in azure_nic.ip_configurations or []:
            ip_configurations.append(NetworkInterfaceIPConfiguration(
                azure_ip_config.name,
                None if azure_ip_config.subnet is None else azure_ip_config.subnet.id,
                azure_ip_config.private_ip_allocation_method,
                None if azure_ip_config.public_ip_address is None else azure_ip_config.public_ip_address.id,
                azure_ip_config.private_ip_address,
                azure_ip_config.primary
            ))

        return NetworkInterface(
            azure_nic.name,
            azure_nic.location,
            ip_configurations,
            bool(azure_nic.enable_ip_forwarding),
            azure_nic.id,
            azure_nic.mac_address,
            azure_nic.primary
        )

    @classmethod
    def _to_vm(cls, azure_vm: VirtualMachine) -> VM:
        storage_profile = azure_vm.storage_profile
        azure_image = storage_profile.image_reference
        azure_os_disk = storage_profile.os_disk
        storage_account_type = None
        if azure_os_disk.managed_disk is not None:
            storage_account_type = azure_os_disk.managed_disk.storage_account_type

        network_profile = NetworkProfile()
        for azure_nic_reference in azure_vm.network_profile.network_interfaces:
            network_profile.network_interfaces.append(
                NetworkInterfaceReference(azure_nic_reference.id, bool(azure_nic_reference.primary)))

        return VM(
            azure_vm.name,
            azure_vm.location,
            azure_vm.hardware_profile.vm_size,
            ImageReference(azure_image.publisher, azure_image.offer, azure_image.sku, azure_image.version),
            OSDisk(azure_os_disk.os_type, azure_os_disk.create_option, azure_os_disk.caching,
                   storage_account_type, azure_os_disk.name),
            OSProfile(azure_vm.os_profile.computer_name, azure_vm.os_profile.admin_username),
            network_profile,
            azure_vm.id
        )
