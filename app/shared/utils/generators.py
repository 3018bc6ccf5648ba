"""ID generators (CUID2-based, optionally prefixed)."""

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    CUID2 mixes a timestamp, a counter and random entropy, so ids stay
    unique across rapid successive calls.

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_prefixed_id(prefix: str) -> str:
    """Return "<prefix>_<cuid>" (e.g. task_k3x9...)."""
    return f"{prefix}_{generate_cuid()}"
