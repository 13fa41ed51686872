from enum import Enum
from types import DynamicClassAttribute


class EnumBase(Enum):
    @DynamicClassAttribute
    def code(self):
        return self._value_[0]

    @DynamicClassAttribute
    def desc(self):
        return self._value_[1]

    @classmethod
    def codes(cls):
        return tuple(member.code for member in cls)

    @classmethod
    def from_code(cls, code: str, default=None):
        for member in cls:
            if member.code == code:
                return member
        return default


class MessageModel(EnumBase):
    BROADCASTING = ("BROADCASTING", "every consumer of the group receives each message")
    CLUSTERING = ("CLUSTERING", "each message is delivered to one consumer of the group")


class ONSChannel(EnumBase):
    CLOUD = ("CLOUD", "cloud")
    ALIYUN = ("ALIYUN", "aliyun public cloud, requires AccessKey and SecretKey")
    ALL = ("ALL", "all")
    LOCAL = ("LOCAL", "local")
    INNER = ("INNER", "inner")


class Trace(EnumBase):
    ON = ("true", "message trace enabled")
    OFF = ("false", "message trace disabled")
