LOG_PATH = "LogPath"

PRODUCER_ID = "ProducerId"

CONSUMER_ID = "ConsumerId"

# Overrides both ProducerId and ConsumerId when present.
GROUP_ID = "GroupId"

ACCESS_KEY = "AccessKey"

SECRET_KEY = "SecretKey"

MESSAGE_MODEL = "MessageModel"

SEND_MSG_TIMEOUT_MILLIS = "SendMsgTimeoutMillis"

SUSPEND_TIME_MILLIS = "SuspendTimeMillis"

SEND_MSG_RETRY_TIMES = "SendMsgRetryTimes"

MAX_MSG_CACHE_SIZE = "MaxMsgCacheSize"

MAX_CACHED_MESSAGE_SIZE_IN_MIB = "MaxCachedMessageSizeInMiB"

# name server domain name
ONS_ADDR = "ONSAddr"

# name server ip addr
NAMESRV_ADDR = "NAMESRV_ADDR"

CONSUME_THREAD_NUMS = "ConsumeThreadNums"

ONS_CHANNEL = "OnsChannel"

ONS_TRACE_SWITCH = "OnsTraceSwitch"

CONSUMER_INSTANCE_NAME = "ConsumerInstanceName"

INSTANCE_ID = "InstanceId"
