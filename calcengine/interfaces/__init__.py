"""Protocol interfaces for calcengine components."""

from .sub_configuration import SubConfigurationProtocol

__all__ = [
    'SubConfigurationProtocol',
]
