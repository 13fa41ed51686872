import typing as t

from ..common import property_key_const as pkc
from ..common.enum import MessageModel, ONSChannel
from ..common.exceptions import ONSClientException
from ..common.faq import error_message


def _one_of(codes: t.Tuple[str, ...], reason: str):
    def rule(value: str) -> t.Optional[str]:
        return None if value in codes else reason

    return rule


def _not_empty(reason: str):
    def rule(value: str) -> t.Optional[str]:
        return None if value else reason

    return rule


# Keys missing from the table are accepted as is.
VALIDATION_RULES: t.Dict[str, t.Callable[[str], t.Optional[str]]] = {
    pkc.MESSAGE_MODEL: _one_of(
        MessageModel.codes(),
        "MessageModel could only be set to BROADCASTING or CLUSTERING, please set it.",
    ),
    pkc.ACCESS_KEY: _not_empty("AccessKey must be set."),
    pkc.SECRET_KEY: _not_empty("SecretKey must be set."),
    pkc.ONS_CHANNEL: _one_of(
        ONSChannel.codes(),
        "ONSChannel could only be set to CLOUD/ALIYUN/ALL/LOCAL/INNER, please reset it.",
    ),
}


def validate(key: str, value: str) -> t.Optional[str]:
    """Return ``None`` if ``value`` is acceptable for ``key``, else the reason."""
    rule = VALIDATION_RULES.get(key)
    if rule is None:
        return None
    return rule(value)


def check(key: str, value: str):
    if not isinstance(value, str):
        reason = f"{key} must be a string, got {type(value).__name__}."
    else:
        reason = validate(key, value)
    if reason is not None:
        raise ONSClientException(
            ONSClientException.CLIENT_CHECK_MSG_EXCEPTION,
            msg=error_message(reason, ONSClientException.CLIENT_CHECK_MSG_EXCEPTION),
            key=key,
        )
