"""Lookup of component startup flags."""

from collections.abc import Mapping
from typing import Any

SECURE_PORT_ARGUMENT = "secure-port"
TLS_CERT_FILE_ARGUMENT = "tls-cert-file"
CERT_DIR_ARGUMENT = "cert-dir"


def _normalize_flag(name: str) -> str:
    return name.strip().lstrip("-")


def get_arg_value(args: Any, key: str, delim: str = "=") -> str:
    """Get the value of a startup flag.

    Arguments may be a mapping of flag to value, a single ``flag=value``
    string, or a list of such strings. Flags may carry leading dashes. When a
    flag is repeated the last occurrence wins. Non-string values are ignored.

    Args:
        args: Component arguments as configured by the operator
        key: Flag name without dashes
        delim: Separator between flag and value

    Returns:
        Flag value, or an empty string when the flag is not set
    """
    if args is None:
        return ""

    if isinstance(args, Mapping):
        value = ""
        for name, candidate in args.items():
            if isinstance(name, str) and _normalize_flag(name) == key:
                value = candidate if isinstance(candidate, str) else ""
        return value

    if isinstance(args, str):
        args = [args]

    if not isinstance(args, list | tuple):
        return ""

    value = ""
    for entry in args:
        if not isinstance(entry, str) or delim not in entry:
            continue
        name, candidate = entry.split(delim, 1)
        if _normalize_flag(name) == key:
            value = candidate
    return value
