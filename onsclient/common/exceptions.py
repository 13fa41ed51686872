class ONSClientException(Exception):
    __slots__ = ("_code", "_msg", "_key")

    CLIENT_CHECK_MSG_EXCEPTION = -400  # invalid client config
    CLIENT_NETWORK_EXCEPTION = -401  # network failure
    CLIENT_PROTOCOL_EXCEPTION = -402  # malformed remoting frame
    CLIENT_ERR = -500  # client error

    def __init__(self, code: int, msg: str = "", key: str = None):
        super().__init__(code, msg)
        self._code = code
        self._msg = msg
        self._key = key

    def __str__(self):
        return f"code: {self._code}, msg: {self._msg}"

    @property
    def code(self):
        return self._code

    @property
    def msg(self):
        return self._msg

    @property
    def key(self):
        return self._key
