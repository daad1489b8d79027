import secrets
import time

from .constants import MAX_NAME_LENGTH, ROOT_NAME_PREFIX


def generate_root_name() -> str:
    """
    Generate a name for a graph root.

    The random part alone is as long as the longest name the sanitizer lets
    through, so the result can never collide with a user task name.
    """
    timestamp = format(time.time_ns() // 1_000_000, 'x')
    return f"{ROOT_NAME_PREFIX}{timestamp}{secrets.token_hex(2)}{secrets.token_hex(MAX_NAME_LENGTH // 2 + 1)}"
