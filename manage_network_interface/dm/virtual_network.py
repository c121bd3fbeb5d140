from dataclasses import dataclass
from typing import List, Optional

from dataclasses_json import dataclass_json
from manage_network_interface.dm.subnet import Subnet


@dataclass_json
@dataclass
class VirtualNetwork:
    name: str
    location: str
    address_prefixes: List[str]
    subnets: List[Subnet]
    id: Optional[str]

    def __init__(self, name: str, location: str, address_prefixes: List[str] = None,
                 subnets: List[Subnet] = None, id: str = None):
        self.name = name
        self.location = location
        self.address_prefixes = [] if address_prefixes is None else address_prefixes
        self.subnets = [] if subnets is None else subnets
        self.id = id

    def get_subnet(self, name: str) -> Subnet:
        for subnet in self.subnets:
            if subnet.name == name:
                return subnet

        raise KeyError("Subnet {} not found in virtual network {}".format(name, self.name))
