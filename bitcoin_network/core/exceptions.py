"""
The custom exceptions used throughout bitcoin_network
"""
__all__ = ["DataEncodingError", "UnknownNetworkError", "MissingNetworkDataError", "IncompleteNetworkTableError"]


class DataEncodingError(Exception):
    """
    For use in encoding/decoding algorithms
    """
    pass


class UnknownNetworkError(DataEncodingError, ValueError):
    """
    For when a name, hrp or magic value matches none of the known networks
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown network: {value!r}")


class MissingNetworkDataError(NotImplementedError):
    """
    A known network was asked for data it does not carry yet. This is a defect in the network tables and is never
    caught inside the package.
    """

    def __init__(self, network, field: str):
        self.network = network
        self.field = field
        super().__init__(f"No {field} defined for network {network}")


class IncompleteNetworkTableError(TypeError):
    """
    Raised on import when a per-network table does not cover every Network member
    """
    pass
