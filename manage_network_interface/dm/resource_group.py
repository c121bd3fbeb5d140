from dataclasses import dataclass
from typing import Optional

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class ResourceGroup:
    name: str
    location: str
    id: Optional[str]

    def __init__(self, name: str, location: str, id: str = None):
        self.name = name
        self.location = location
        self.id = id
