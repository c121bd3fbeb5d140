from dataclasses import dataclass
from typing import Optional

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class Subnet:
    name: str
    address_prefix: str
    id: Optional[str]

    def __init__(self, name: str, address_prefix: str, id: str = None):
        self.name = name
        self.address_prefix = address_prefix
        self.id = id
