import sys

# ------------------------------------------------------------------------
# assertions


def assert_condition(condition, message=None):
    """Raises an AssertionError carrying `message` if `condition` is falsy."""
    if not condition:
        raise AssertionError(message if message is not None else "Anonymous Error")


# ------------------------------------------------------------------------
# mapping enumeration


def mapping_keys(mapping) -> list:
    """Returns the keys of a mapping as a list, in the mapping's order"""
    return list(mapping.keys())


def mapping_entries(mapping) -> list[tuple]:
    """Returns the (key, value) pairs of a mapping as a list, in the mapping's order"""
    return list(mapping.items())


# ------------------------------------------------------------------------
# logging


def log(msg, file=None):
    print(msg, file=sys.stderr if file is None else file)


def tryprint(msg, verbose):
    if verbose:
        log(msg)
