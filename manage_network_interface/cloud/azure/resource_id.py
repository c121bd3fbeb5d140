class AzureResourceId:
    """
    Helpers for ARM resource identifiers of the form
    /subscriptions/{sub}/resourceGroups/{rg}/providers/{namespace}/{type}/{name}
    """

    NETWORK_INTERFACES = ('Microsoft.Network', 'networkInterfaces')
    VIRTUAL_MACHINES = ('Microsoft.Compute', 'virtualMachines')

    @classmethod
    def build(cls, subscription_id: str, resource_group_name: str, namespace: str, resource_type: str, name: str):
        return '/subscriptions/{}/resourceGroups/{}/providers/{}/{}/{}'.format(
            subscription_id,
            resource_group_name,
            namespace,
            resource_type,
            name
        )

    @classmethod
    def get_network_interface_id(cls, subscription_id: str, resource_group_name: str, nic_name: str):
        return cls.build(subscription_id, resource_group_name, *cls.NETWORK_INTERFACES, nic_name)

    @classmethod
    def get_resource_group_name(cls, resource_id: str):
        parts = cls._split(resource_id)

        return parts[3]

    @classmethod
    def get_resource_name(cls, resource_id: str):
        parts = cls._split(resource_id)

        return parts[-1]

    @classmethod
    def _split(cls, resource_id: str):
        if resource_id is None:
            raise ValueError("Resource id is missing")

        parts = resource_id.strip('/').split('/')
        if len(parts) < 4 or parts[0].lower() != 'subscriptions' or parts[2].lower() != 'resourcegroups':
            raise ValueError("Invalid resource id: {}".format(resource_id))

        return parts
