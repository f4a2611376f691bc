"""Species name pools."""

from zookeeper.names.loader import NamePoolLoader, empty_name_pools, parse_name_pools
from zookeeper.names.pool import NamePool

__all__ = [
    "NamePool",
    "NamePoolLoader",
    "empty_name_pools",
    "parse_name_pools",
]
