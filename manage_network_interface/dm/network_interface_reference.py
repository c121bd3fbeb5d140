from dataclasses import dataclass
from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class NetworkInterfaceReference:
    id: str
    primary: bool

    def __init__(self, id: str, primary: bool = False):
        self.id = id
        self.primary = primary
