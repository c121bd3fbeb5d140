from dataclasses import dataclass
from typing import Optional

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class PublicIPAddress:
    name: str
    location: str
    allocation_method: str
    domain_name_label: Optional[str]
    ip_address: Optional[str]
    id: Optional[str]

    def __init__(self, name: str, location: str, allocation_method: str = "Dynamic",
                 domain_name_label: str = None, ip_address: str = None, id: str = None):
        self.name = name
        self.location = location
        self.allocation_method = allocation_method
        self.domain_name_label = domain_name_label
        self.ip_address = ip_address
        self.id = id
