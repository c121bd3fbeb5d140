from dataclasses import dataclass
from typing import Optional

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class NetworkInterfaceIPConfiguration:
    name: str
    subnet_id: str
    private_ip_allocation_method: str
    public_ip_address_id: Optional[str]
    private_ip_address: Optional[str]
    primary: Optional[bool]

    def __init__(self, name: str, subnet_id: str, private_ip_allocation_method: str = "Dynamic",
                 public_ip_address_id: str = None, private_ip_address: str = None, primary: bool = None):
        self.name = name
        self.subnet_id = subnet_id
        self.private_ip_allocation_method = private_ip_allocation_method
        self.public_ip_address_id = public_ip_address_id
        self.private_ip_address = private_ip_address
        self.primary = primary
