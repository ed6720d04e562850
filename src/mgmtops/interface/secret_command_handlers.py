"""Secret command handlers for the interface layer."""

import getpass
import sys
from typing import TYPE_CHECKING, Any, Dict

from mgmtops.infrastructure.error import with_error_handling

if TYPE_CHECKING:
    import argparse

    from mgmtops.bootstrap import Application


@with_error_handling(context="encrypt_secret")
def handle_encrypt_secret(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    """Encrypt a value read from stdin (when piped) or a prompt with the configured key."""
    if sys.stdin.isatty():
        value = getpass.getpass("Value to encrypt: ")
    else:
        value = sys.stdin.readline().rstrip("\n")
    return {"encrypted": app.cipher.encrypt(value).get_secret_value()}
