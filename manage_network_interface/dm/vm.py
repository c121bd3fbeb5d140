from dataclasses import dataclass
from typing import Optional

from dataclasses_json import dataclass_json
from manage_network_interface.dm.image_reference import ImageReference
from manage_network_interface.dm.network_profile import NetworkProfile
from manage_network_interface.dm.os_disk import OSDisk
from manage_network_interface.dm.os_profile import OSProfile


@dataclass_json
@dataclass
class VM:
    name: str
    location: str
    size: str
    image: ImageReference
    os_disk: OSDisk
    os_profile: OSProfile
    network_profile: NetworkProfile
    id: Optional[str]

    def __init__(self, name: str, location: str, size: str, image: ImageReference, os_disk: OSDisk,
                 os_profile: OSProfile, network_profile: NetworkProfile = None, id: str = None):
        self.name = name
        self.location = location
        self.size = size
        self.image = image
        self.os_disk = os_disk
        self.os_profile = os_profile
        self.network_profile = NetworkProfile() if network_profile is None else network_profile
        self.id = id
