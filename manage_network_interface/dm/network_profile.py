from dataclasses import dataclass
from dataclasses_json import dataclass_json
from typing import List
from manage_network_interface.dm.network_interface_reference import NetworkInterfaceReference


@dataclass_json
@dataclass
class NetworkProfile:
    network_interfaces: List[NetworkInterfaceReference]

    def __init__(self, network_interfaces: List[NetworkInterfaceReference] = None):
        if network_interfaces is None:
            self.network_interfaces: List[NetworkInterfaceReference] = []
        else:
            self.network_interfaces = network_interfaces

    def get_primary(self) -> NetworkInterfaceReference:
        self.validate()
        return next(nic for nic in self.network_interfaces if nic.primary)

    def validate(self):
        """
        A VM needs at least one network interface and exactly one of them flagged primary.

        Raises:
            ValueError: if the profile is empty or the primary count is not one.
        """
        if len(self.network_interfaces) == 0:
            raise ValueError("Network profile does not reference any network interface")

        primaries = [nic.id for nic in self.network_interfaces if nic.primary]
        if len(primaries) != 1:
            raise ValueError("Network profile must have exactly one primary network interface, found {}: {}"
                             .format(len(primaries), primaries))
