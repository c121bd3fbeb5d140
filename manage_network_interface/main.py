import argparse
import logging
import sys

from manage_network_interface.cloud.cloud_factory import CloudFactory
from manage_network_interface.config import Settings
from manage_network_interface.service.network_interface_service import NetworkInterfaceService

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Azure Network sample for managing network interfaces. Credentials are read from the "
                    "CLIENT_ID, CLIENT_SECRET, TENANT_ID and SUBSCRIPTION_ID environment variables.")
    parser.add_argument("--location", help="Azure region for the sample resources (default: eastus)", type=str)
    parser.add_argument("--log", help="Write the log to this file instead of stderr", type=str)
    parser.add_argument("--debug", help="Log request details and echo the log to stdout", action="store_true")

    return parser.parse_args(argv)


def setup_logging(log_file: str = None, debug: bool = False):
    handlers = []
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))
    if debug:
        handlers.append(logging.StreamHandler(sys.stdout))
    elif log_file is None:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(format='%(asctime)s py %(levelname)s %(message)s', handlers=handlers,
                        level=logging.DEBUG if debug else logging.INFO)
    # azure-core logs every HTTP request at INFO
    logging.getLogger("azure").setLevel(logging.WARNING)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log, args.debug)

    settings = Settings.from_env(location=args.location)
    logger.info("Subscription ID: {}".format(settings.subscription_id))
    logger.info("Location: {}".format(settings.location))

    try:
        service = NetworkInterfaceService(settings.location, CloudFactory(settings))
        service.run()
    except Exception:
        logger.exception("Sample failed")
        return 1

    return 0
