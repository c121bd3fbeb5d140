"""
Shared test fixtures and configuration.
"""

import copy

import pytest

from manage_network_interface.cloud.azure.resource_id import AzureResourceId
from manage_network_interface.cloud.cloud import ICloud, ResourceNotFound
from manage_network_interface.dm.resource_group import ResourceGroup

SUBSCRIPTION_ID = "00000000-0000-0000-0000-000000000000"


class FakeCloud(ICloud):
    """
    In-memory cloud that echoes descriptors back with identifiers assigned
    and records every call in order.
    """

    def __init__(self, subscription_id: str = SUBSCRIPTION_ID):
        self.subscription_id = subscription_id
        self.calls = []
        self.resource_groups = {}
        self.nics = {}
        self.vms = {}
        self.fail_on = {}

    def _record(self, name, *args):
        self.calls.append((name, args))
        if name in self.fail_on:
            raise self.fail_on[name]

    def call_names(self):
        return [name for name, _ in self.calls]

    def _id(self, resource_group_name, namespace, resource_type, name):
        return AzureResourceId.build(self.subscription_id, resource_group_name, namespace, resource_type, name)

    def create_resource_group(self, name, location):
        self._record("create_resource_group", name, location)
        resource_group = ResourceGroup(name, location, "/subscriptions/{}/resourceGroups/{}".format(
            self.subscription_id, name))
        self.resource_groups[resource_group.id] = resource_group

        return copy.deepcopy(resource_group)

    def delete_resource_group(self, resource_group_id):
        self._record("delete_resource_group", resource_group_id)
        if resource_group_id not in self.resource_groups:
            raise ResourceNotFound(resource_group_id)
        del self.resource_groups[resource_group_id]

    def create_virtual_network(self, resource_group_name, virtual_network):
        self._record("create_virtual_network", resource_group_name, copy.deepcopy(virtual_network))
        vnet = copy.deepcopy(virtual_network)
        vnet.id = self._id(resource_group_name, "Microsoft.Network", "virtualNetworks", vnet.name)
        for subnet in vnet.subnets:
            subnet.id = "{}/subnets/{}".format(vnet.id, subnet.name)

        return vnet

    def create_public_ip_address(self, resource_group_name, public_ip_address):
        self._record("create_public_ip_address", resource_group_name, copy.deepcopy(public_ip_address))
        pip = copy.deepcopy(public_ip_address)
        pip.id = self._id(resource_group_name, "Microsoft.Network", "publicIPAddresses", pip.name)

        return pip

    def create_or_update_network_interface(self, resource_group_name, network_interface):
        self._record("create_or_update_network_interface", resource_group_name, copy.deepcopy(network_interface))
        nic = copy.deepcopy(network_interface)
        if nic.id is None:
            nic.id = self._id(resource_group_name, *AzureResourceId.NETWORK_INTERFACES, nic.name)
            nic.mac_address = "00-0D-3A-00-00-{:02X}".format(len(self.nics))
            for ip_config in nic.ip_configurations:
                ip_config.private_ip_address = "172.16.0.{}".format(len(self.nics) + 4)
        self.nics[nic.id] = nic

        return copy.deepcopy(nic)

    def update_network_interface_public_ip(self, resource_group_name, nic_name, public_ip_address_id):
        self._record("update_network_interface_public_ip", resource_group_name, nic_name, public_ip_address_id)
        nic_id = self._id(resource_group_name, *AzureResourceId.NETWORK_INTERFACES, nic_name)
        if nic_id not in self.nics:
            raise ResourceNotFound(nic_id)

        nic = copy.deepcopy(self.nics[nic_id])
        if not nic.ip_configurations:
            raise ValueError("Network interface {} has no IP configuration".format(nic_id))
        nic.ip_configurations[0].public_ip_address_id = public_ip_address_id
        self.nics[nic_id] = nic

        return copy.deepcopy(nic)

    def list_network_interfaces(self, resource_group_name):
        self._record("list_network_interfaces", resource_group_name)

        return [copy.deepcopy(nic) for nic in self.nics.values()]

    def delete_network_interface(self, network_interface_id):
        self._record("delete_network_interface", network_interface_id)
        for vm in self.vms.values():
            for reference in vm.network_profile.network_interfaces:
                if reference.id == network_interface_id:
                    raise AssertionError("NIC {} is still attached to VM {}".format(network_interface_id, vm.id))
        del self.nics[network_interface_id]

    def create_vm(self, resource_group_name, vm):
        self._record("create_vm", resource_group_name, copy.deepcopy(vm))
        created = copy.deepcopy(vm)
        created.id = self._id(resource_group_name, *AzureResourceId.VIRTUAL_MACHINES, vm.name)
        created.os_profile.admin_password = None
        self.vms[created.id] = created

        return copy.deepcopy(created)

    def delete_vm(self, vm_id):
        self._record("delete_vm", vm_id)
        del self.vms[vm_id]


class FakeCloudFactory:
    def __init__(self, cloud: ICloud):
        self.cloud = cloud

    def get_cloud(self) -> ICloud:
        return self.cloud


@pytest.fixture
def fake_cloud():
    """Fixture providing a fresh in-memory cloud."""
    return FakeCloud()


@pytest.fixture
def cloud_factory(fake_cloud):
    """Fixture providing a factory that hands out the in-memory cloud."""
    return FakeCloudFactory(fake_cloud)
