import random
import secrets
import string

from manage_network_interface.dm.network_interface import NetworkInterface
from manage_network_interface.dm.vm import VM

ADMIN_USERNAME = "tirekicker"
PASSWORD_SYMBOLS = "!@#$%^&*-_=+"


def create_random_name(prefix: str) -> str:
    return "{}{}".format(prefix, random.randrange(9999))


def create_username() -> str:
    return ADMIN_USERNAME


def create_password(length: int = 16) -> str:
    """
    Generates an admin password that passes Azure's complexity rules.

    Args:
        length (int): Total password length, at least 12 (default: 16)

    Returns:
        str: A password with at least one lower case letter, upper case letter, digit and symbol.
    """
    if length < 12:
        raise ValueError("Password length must be at least 12, got {}".format(length))

    required = [
        secrets.choice(string.ascii_lowercase),
        secrets.choice(string.ascii_uppercase),
        secrets.choice(string.digits),
        secrets.choice(PASSWORD_SYMBOLS),
    ]
    alphabet = string.ascii_letters + string.digits + PASSWORD_SYMBOLS
    rest = [secrets.choice(alphabet) for _ in range(length - len(required))]
    chars = required + rest
    random.SystemRandom().shuffle(chars)

    return "".join(chars)


def format_network_interface(nic: NetworkInterface) -> str:
    lines = [
        "Network interface: {}".format(nic.id),
        "\tName: {}".format(nic.name),
        "\tLocation: {}".format(nic.location),
        "\tMAC address: {}".format(nic.mac_address),
        "\tIP forwarding enabled: {}".format(nic.enable_ip_forwarding),
        "\tIP configurations:",
    ]
    for ip_config in nic.ip_configurations:
        lines.append("\t\tName: {}".format(ip_config.name))
        lines.append("\t\t\tPrivate IP: {} ({})".format(ip_config.private_ip_address,
                                                       ip_config.private_ip_allocation_method))
        lines.append("\t\t\tSubnet: {}".format(ip_config.subnet_id))
        lines.append("\t\t\tPublic IP: {}".format(ip_config.public_ip_address_id))

    return "\n".join(lines)


def format_vm(vm: VM) -> str:
    lines = [
        "Virtual machine: {}".format(vm.id),
        "\tName: {}".format(vm.name),
        "\tLocation: {}".format(vm.location),
        "\tSize: {}".format(vm.size),
        "\tImage: {}:{}:{}:{}".format(vm.image.publisher, vm.image.offer, vm.image.sku, vm.image.version),
        "\tOS disk: {} ({}, caching {}, {})".format(vm.os_disk.name, vm.os_disk.os_type, vm.os_disk.caching,
                                                  vm.os_disk.storage_account_type),
        "\tComputer name: {}".format(vm.os_profile.computer_name),
        "\tAdmin user: {}".format(vm.os_profile.admin_username),
        "\tNetwork interfaces:",
    ]
    for nic in vm.network_profile.network_interfaces:
        lines.append("\t\t{}{}".format(nic.id, " (primary)" if nic.primary else ""))

    return "\n".join(lines)
