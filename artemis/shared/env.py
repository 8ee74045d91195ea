"""Docker-secret style environment resolution.

Credentials such as ``GOVEE_API_KEY`` are usually mounted as files in
container deployments. For every ``<KEY>_FILE`` variable the file contents
are exposed as ``<KEY>`` unless ``<KEY>`` is already set.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, MutableMapping, Optional

from artemis.shared.logging import get_logger

logger = get_logger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def _read_secret(key: str, file_path: str) -> Optional[str]:
    try:
        return Path(file_path).read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        logger.warning("env.secret_file.missing", key=key, path=file_path, error=str(exc))
    except UnicodeDecodeError as exc:
        logger.warning(
            "env.secret_file.decode_failed", key=key, path=file_path, error=str(exc)
        )
    except OSError as exc:
        logger.warning(
            "env.secret_file.load_failed", key=key, path=file_path, error=str(exc)
        )
    return None


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Resolve ``*_FILE`` variables into their target keys.

    Errors are logged and skipped; a missing secret file never prevents the
    gateway from starting.

    Returns:
        Mapping of the keys that were populated to the file they came from.
    """
    env = os.environ if environ is None else environ
    resolved: Dict[str, str] = {}

    for key, file_path in list(env.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if env.get(target_key):
            continue
        value = _read_secret(key, file_path)
        if value is None:
            continue
        env[target_key] = value
        resolved[target_key] = file_path

    return resolved


load_secret_file_variables()
