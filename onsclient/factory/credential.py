import typing as t
from pathlib import Path

import orjson

from ..common import conf, property_key_const as pkc, utils
from ..common.log import logger

CREDENTIAL_KEYS = (pkc.ACCESS_KEY, pkc.SECRET_KEY, pkc.NAMESRV_ADDR, pkc.GROUP_ID)


def credential_file() -> t.Optional[Path]:
    home = utils.home_directory()
    if home is None:
        return None
    return home / conf.credential_dir / conf.credential_name


def read_credential(file: Path) -> t.Optional[dict]:
    """
    Read and parse the credential file.

    Any failure is logged and reported as ``None``, the file is optional.
    """
    try:
        found = file.exists() and file.is_file()
    except OSError as err:
        logger.warning(f"[Credential] failed to check config file: {file}, {err}")
        return None

    if not found:
        logger.info(f"[Credential] no default config file found at {file}")
        return None

    try:
        content = file.read_text(encoding=conf.encode)
    except (OSError, UnicodeDecodeError) as err:
        logger.warning(f"[Credential] failed to read config file: {file}, {err}")
        return None

    try:
        root = orjson.loads(content)
    except orjson.JSONDecodeError as err:
        logger.warning(f"[Credential] failed to parse config JSON. Cause: {err}")
        return None

    if not isinstance(root, dict):
        logger.warning(
            f"[Credential] config JSON must be an object, got {type(root).__name__}"
        )
        return None
    return root


def load_credential(prop) -> None:
    """
    Seed ``prop`` from ``<home>/ons/credential``.

    Only AccessKey, SecretKey, NAMESRV_ADDR and GroupId are consulted. Each one
    goes through the validated write, so an empty AccessKey or SecretKey in the
    file raises ``ONSClientException`` out of here.
    """
    file = credential_file()
    if file is None:
        logger.info("[Credential] home directory unavailable, skip default config")
        return

    fields = read_credential(file)
    if fields is None:
        return

    for key in CREDENTIAL_KEYS:
        if key not in fields:
            continue
        value = fields[key]
        # non-string nodes read as an empty string
        prop.set_factory_property(key, value if isinstance(value, str) else "")
        logger.info(f"[Credential] set {key} through default config file")
