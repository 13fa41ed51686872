from .common import property_key_const
from .common.enum import MessageModel, ONSChannel, Trace
from .common.exceptions import ONSClientException
from .factory.property import FactoryProperty

__all__ = [
    "FactoryProperty",
    "MessageModel",
    "ONSChannel",
    "Trace",
    "ONSClientException",
    "property_key_const",
]
