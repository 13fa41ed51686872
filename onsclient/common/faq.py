from .exceptions import ONSClientException

_CODE_DESC = {
    ONSClientException.CLIENT_CHECK_MSG_EXCEPTION: "client config check failed",
    ONSClientException.CLIENT_NETWORK_EXCEPTION: "network failure",
    ONSClientException.CLIENT_PROTOCOL_EXCEPTION: "protocol failure",
    ONSClientException.CLIENT_ERR: "client error",
}


def error_message(msg: str, code: int) -> str:
    """Append the error code and its category to a diagnostic message."""
    desc = _CODE_DESC.get(code, "unknown error")
    return f"{msg} [{desc}, error code: {code}]"
