import sys

from manage_network_interface.main import main

sys.exit(main())
