import logging
from os import getenv

logger_name = "ons"
log_level = logging.getLevelName(getenv("ONS_LOG_LEVEL", "INFO"))
encode = "UTF-8"

# <home>/ons/credential
credential_dir = "ons"
credential_name = "credential"

default_send_msg_timeout = 3000  # milliseconds
default_suspend_time = 3000  # milliseconds
default_max_msg_cache_size = 1000
default_channel = "ALIYUN"
