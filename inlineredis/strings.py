from .codec import ValueKind


class StringCommands:

    def set(self, key, value):
        """Set the value of a key."""
        self.execute("SET", key, payload=value)
        return True

    def setnx(self, key, value):
        """Set the value of a key only if it does not exist. True if it was set."""
        return self.execute("SETNX", key, payload=value) == 1

    def get(self, key, as_=ValueKind.AUTO):
        """Get the value of a key, or None if it does not exist."""
        return self.execute("GET", key, as_=as_)

    def incr(self, key, amount=None):
        """
        Increment the integer value of a key by one, or by ``amount``.
        A missing key counts as zero. Never retried after a timeout.
        """
        if amount is None:
            return self.execute("INCR", key)
        return self.execute("INCRBY", key, amount)

    def decr(self, key, amount=None):
        """Decrement the integer value of a key by one, or by ``amount``."""
        if amount is None:
            return self.execute("DECR", key)
        return self.execute("DECRBY", key, amount)

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.set(key, value)
