import typing as t
from datetime import timedelta

from . import validator
from .credential import load_credential
from ..common import conf, property_key_const as pkc, utils
from ..common.enum import MessageModel, ONSChannel, Trace
from ..common.exceptions import ONSClientException
from ..common.faq import error_message
from ..common.log import logger

Duration = t.Union[int, timedelta]


class FactoryProperty(object):
    """
    Connection and behaviour parameters of a messaging client.

    All values are kept as strings in one map. Writes through
    ``set_factory_property`` (and every typed setter) are validated, reads
    never fail except for the integer getters on a corrupted value.

    Not thread safe: build it on one thread, then hand it to the client.
    """

    EMPTY_STRING = ""

    def __init__(self):
        self._properties: t.Dict[str, str] = {}
        self.set_defaults()
        load_credential(self)

    def set_defaults(self):
        self.set_message_model(MessageModel.CLUSTERING)
        self.set_send_msg_timeout(conf.default_send_msg_timeout)
        self.set_suspend_duration(conf.default_suspend_time)
        self.set_max_msg_cache_size(conf.default_max_msg_cache_size)
        self.with_trace_feature(Trace.ON)

    # store

    def set_factory_property(self, key: str, value: str):
        validator.check(key, value)
        self._properties[key] = value
        return self

    def get_property(self, key: str, default: str = None) -> t.Optional[str]:
        return self._properties.get(key, default)

    def set_factory_properties(self, properties: t.Mapping[str, str]):
        # bulk replace skips validation
        self._properties = dict(properties)
        return self

    def get_factory_properties(self) -> t.Dict[str, str]:
        return dict(self._properties)

    def __contains__(self, key: str):
        return key in self._properties

    def __len__(self):
        return len(self._properties)

    # durations

    def set_send_msg_timeout(self, timeout: Duration):
        return self.set_factory_property(
            pkc.SEND_MSG_TIMEOUT_MILLIS, str(utils.to_millis(timeout))
        )

    def get_send_msg_timeout(self) -> timedelta:
        return self._get_millis(pkc.SEND_MSG_TIMEOUT_MILLIS)

    def set_suspend_duration(self, duration: Duration):
        millis = utils.to_millis(duration)
        if not millis:
            return self
        return self.set_factory_property(pkc.SUSPEND_TIME_MILLIS, str(millis))

    def get_suspend_time_millis(self) -> timedelta:
        return self._get_millis(pkc.SUSPEND_TIME_MILLIS)

    def _get_millis(self, key: str) -> timedelta:
        value = utils.simple_atoi(self.get_property(key))
        if value is None:
            return timedelta(0)
        return timedelta(milliseconds=value)

    # integers, -1 when unset

    def set_send_msg_retry_times(self, value: int):
        return self.set_factory_property(pkc.SEND_MSG_RETRY_TIMES, str(int(value)))

    def get_send_msg_retry_times(self) -> int:
        return self._get_int(pkc.SEND_MSG_RETRY_TIMES)

    def set_max_msg_cache_size(self, value: int):
        return self.set_factory_property(pkc.MAX_MSG_CACHE_SIZE, str(int(value)))

    def get_max_msg_cache_size(self) -> int:
        return self._get_int(pkc.MAX_MSG_CACHE_SIZE)

    def set_max_msg_cache_size_in_mib(self, value: int):
        return self.set_factory_property(
            pkc.MAX_CACHED_MESSAGE_SIZE_IN_MIB, str(int(value))
        )

    def get_max_msg_cache_size_in_mib(self) -> int:
        return self._get_int(pkc.MAX_CACHED_MESSAGE_SIZE_IN_MIB)

    def set_consume_thread_nums(self, value: int):
        return self.set_factory_property(pkc.CONSUME_THREAD_NUMS, str(int(value)))

    def get_consume_thread_nums(self) -> int:
        return self._get_int(pkc.CONSUME_THREAD_NUMS)

    def _get_int(self, key: str) -> int:
        value = self.get_property(key)
        if value is None:
            return -1
        # raises ValueError on a value written around the typed setters
        return utils.parse_int32(value)

    # enums

    def set_message_model(self, message_model: MessageModel):
        if not isinstance(message_model, MessageModel):
            raise ONSClientException(
                ONSClientException.CLIENT_CHECK_MSG_EXCEPTION,
                msg=error_message(
                    f"Unknown message model: {message_model!r}",
                    ONSClientException.CLIENT_CHECK_MSG_EXCEPTION,
                ),
                key=pkc.MESSAGE_MODEL,
            )
        return self.set_factory_property(pkc.MESSAGE_MODEL, message_model.code)

    def get_message_model(self) -> MessageModel:
        return MessageModel.from_code(
            self.get_property(pkc.MESSAGE_MODEL), MessageModel.CLUSTERING
        )

    def set_ons_channel(self, channel: ONSChannel):
        if not isinstance(channel, ONSChannel):
            raise ONSClientException(
                ONSClientException.CLIENT_CHECK_MSG_EXCEPTION,
                msg=error_message(
                    "ONSChannel could only be set to CLOUD/ALIYUN/ALL/LOCAL/INNER, "
                    "please reset it.",
                    ONSClientException.CLIENT_CHECK_MSG_EXCEPTION,
                ),
                key=pkc.ONS_CHANNEL,
            )
        return self.set_factory_property(pkc.ONS_CHANNEL, channel.code)

    def get_ons_channel(self) -> ONSChannel:
        return ONSChannel.from_code(self.get_channel(), ONSChannel.ALIYUN)

    def get_channel(self) -> str:
        return self.get_property(pkc.ONS_CHANNEL, conf.default_channel)

    # trace switch

    def with_trace_feature(self, trace: Trace):
        return self.set_factory_property(pkc.ONS_TRACE_SWITCH, trace.code)

    def set_ons_trace_switch(self, should_trace: bool):
        trace = Trace.ON if should_trace else Trace.OFF
        return self.set_factory_property(pkc.ONS_TRACE_SWITCH, trace.code)

    def get_ons_trace_switch(self) -> bool:
        return self.get_property(pkc.ONS_TRACE_SWITCH, Trace.ON.code) == Trace.ON.code

    # ids, GroupId wins over ProducerId / ConsumerId

    def get_producer_id(self) -> str:
        group_id = self.get_property(pkc.GROUP_ID)
        if group_id is not None:
            return group_id
        return self.get_property(pkc.PRODUCER_ID, self.EMPTY_STRING)

    def set_producer_id(self, producer_id: str):
        return self.set_factory_property(pkc.PRODUCER_ID, producer_id)

    def get_consumer_id(self) -> str:
        group_id = self.get_property(pkc.GROUP_ID)
        if group_id is not None:
            return group_id
        return self.get_property(pkc.CONSUMER_ID, self.EMPTY_STRING)

    def set_consumer_id(self, consumer_id: str):
        return self.set_factory_property(pkc.CONSUMER_ID, consumer_id)

    def get_group_id(self) -> str:
        return self.get_property(pkc.GROUP_ID, self.EMPTY_STRING)

    def set_group_id(self, group_id: str):
        return self.set_factory_property(pkc.GROUP_ID, group_id)

    # plain strings

    def get_access_key(self) -> str:
        return self.get_property(pkc.ACCESS_KEY, self.EMPTY_STRING)

    def set_access_key(self, access_key: str):
        return self.set_factory_property(pkc.ACCESS_KEY, access_key)

    def get_secret_key(self) -> str:
        return self.get_property(pkc.SECRET_KEY, self.EMPTY_STRING)

    def set_secret_key(self, secret_key: str):
        return self.set_factory_property(pkc.SECRET_KEY, secret_key)

    def get_name_srv_addr(self) -> str:
        return self.get_property(pkc.NAMESRV_ADDR, self.EMPTY_STRING)

    def set_name_srv_addr(self, addr: str):
        return self.set_factory_property(pkc.NAMESRV_ADDR, addr)

    def get_name_srv_domain(self) -> str:
        return self.get_property(pkc.ONS_ADDR, self.EMPTY_STRING)

    def set_name_srv_domain(self, domain: str):
        return self.set_factory_property(pkc.ONS_ADDR, domain)

    def get_instance_id(self) -> str:
        return self.get_property(pkc.INSTANCE_ID, self.EMPTY_STRING)

    def set_instance_id(self, instance_id: str):
        return self.set_factory_property(pkc.INSTANCE_ID, instance_id)

    def get_consumer_instance_name(self) -> str:
        return self.get_property(pkc.CONSUMER_INSTANCE_NAME, self.EMPTY_STRING)

    def set_consumer_instance_name(self, name: str):
        return self.set_factory_property(pkc.CONSUMER_INSTANCE_NAME, name)

    def get_log_path(self) -> str:
        return self.get_property(pkc.LOG_PATH, self.EMPTY_STRING)

    def set_log_path(self, log_path: str):
        return self.set_factory_property(pkc.LOG_PATH, log_path)

    def __bool__(self):
        if self.get_ons_channel() is ONSChannel.ALIYUN:
            ready = bool(self.get_access_key()) and bool(self.get_secret_key())
            if not ready:
                logger.debug("[Factory] ALIYUN channel requires AccessKey and SecretKey")
            return ready
        return True

    def __repr__(self):
        shown = dict(self._properties)
        if pkc.SECRET_KEY in shown:
            shown[pkc.SECRET_KEY] = "******"
        return self.__class__.__name__ + str(shown)
