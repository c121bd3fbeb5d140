from dataclasses import dataclass
from dataclasses_json import dataclass_json
from typing import List, Optional
from manage_network_interface.dm.network_interface_ip_configuration import NetworkInterfaceIPConfiguration


@dataclass_json
@dataclass
class NetworkInterface:
    name: str
    location: str
    ip_configurations: List[NetworkInterfaceIPConfiguration]
    enable_ip_forwarding: bool
    id: Optional[str]
    mac_address: Optional[str]
    primary: Optional[bool]

    def __init__(self, name: str, location: str, ip_configurations: List[NetworkInterfaceIPConfiguration] = None,
                 enable_ip_forwarding: bool = False, id: str = None, mac_address: str = None, primary: bool = None):
        self.name = name
        self.location = location
        if ip_configurations is None:
            self.ip_configurations: List[NetworkInterfaceIPConfiguration] = []
        else:
            self.ip_configurations = ip_configurations
        self.enable_ip_forwarding = enable_ip_forwarding
        self.id = id
        self.mac_address = mac_address
        self.primary = primary
