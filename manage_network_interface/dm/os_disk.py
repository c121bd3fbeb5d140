from dataclasses import dataclass
from typing import Optional

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class OSDisk:
    os_type: str
    create_option: str
    caching: str
    storage_account_type: str
    name: Optional[str]

    def __init__(self, os_type: str = "Windows", create_option: str = "FromImage", caching: str = "ReadOnly",
                 storage_account_type: str = "Standard_LRS", name: str = None):
        self.os_type = os_type
        self.create_option = create_option
        self.caching = caching
        self.storage_account_type = storage_account_type
        self.name = name
