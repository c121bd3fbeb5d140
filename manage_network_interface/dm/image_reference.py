from dataclasses import dataclass
from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class ImageReference:
    publisher: str
    offer: str
    sku: str
    version: str

    def __init__(self, publisher: str, offer: str, sku: str, version: str = "latest"):
        self.publisher = publisher
        self.offer = offer
        self.sku = sku
        self.version = version
