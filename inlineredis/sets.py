from .codec import ValueKind


def frozen(value):
    """
    Make a decoded member usable in a set: lists become tuples, dicts become
    frozensets of their items and sets become frozensets, recursively.
    """
    if isinstance(value, (list, tuple)):
        return tuple(frozen(v) for v in value)
    if isinstance(value, dict):
        return frozenset((frozen(k), frozen(v)) for k, v in value.items())
    if isinstance(value, (set, frozenset)):
        return frozenset(frozen(v) for v in value)
    return value


def _member_set(members):
    return {frozen(m) for m in members or ()}


class SetCommands:
    # Set replies come back as Python sets; structured members are frozen (see ``frozen``).

    def sadd(self, key, member):
        """Add a member to a set. True if it was not already there."""
        return self.execute("SADD", key, payload=member, subject=key) == 1

    def srem(self, key, member):
        """Remove a member from a set. True if it was there."""
        return self.execute("SREM", key, payload=member, subject=key) == 1

    def scard(self, key):
        """Get the number of members in a set."""
        return self.execute("SCARD", key, subject=key)

    def sismember(self, key, member):
        """Determine if a given value is a member of a set."""
        return self.execute("SISMEMBER", key, payload=member, subject=key) == 1

    def sinter(self, *keys, as_=ValueKind.AUTO):
        """Intersect multiple sets."""
        return _member_set(self.execute("SINTER", *keys, as_=as_))

    def sinterstore(self, destkey, *keys):
        """Intersect multiple sets and store the result in destkey."""
        self.execute("SINTERSTORE", destkey, *keys)
        return True

    def smembers(self, key, as_=ValueKind.AUTO):
        """Get all the members in a set."""
        return _member_set(self.execute("SMEMBERS", key, as_=as_))
