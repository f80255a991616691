"""Key capability: how a stored value exposes the key it is ordered by."""

class Keyed(object):
    """Base class for records whose ordering key is a distinct field.

    Subclasses implement key() and return the same key for the lifetime of
    the record. Changing it while the record is stored breaks the tree
    ordering silently."""

    def key(self):
        raise NotImplementedError


def identity(value):
    """Ordered values are their own key."""
    return value

def key_of(value):
    """Returns the key of value: value.key() for Keyed records, value itself
    otherwise."""
    if isinstance(value, Keyed):
        return value.key()
    return value
