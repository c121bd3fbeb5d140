from dataclasses import dataclass, field
from typing import Optional

from dataclasses_json import Exclude, config, dataclass_json


@dataclass_json
@dataclass
class OSProfile:
    computer_name: str
    admin_username: str
    # kept out of logs and json dumps
    admin_password: Optional[str] = field(default=None, repr=False, metadata=config(exclude=Exclude.ALWAYS))
