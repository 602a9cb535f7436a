from .codec import ValueKind


class KeyCommands:

    def exists(self, key):
        """Check if a key exists."""
        return self.execute("EXISTS", key) == 1

    def delete(self, key):
        """Delete a key. True if it was removed."""
        return self.execute("DEL", key) == 1

    def keys(self, pattern):
        """Find all keys matching the given glob-style pattern."""
        reply = self.execute("KEYS", pattern, as_=ValueKind.TEXT)
        if not reply:
            return []
        return reply.split(" ")

    def type(self, key):
        """Determine the type stored at key: none, string, list or set."""
        return self.execute("TYPE", key)

    def randomkey(self):
        """Return a random key from the selected database."""
        return self.execute("RANDOMKEY")

    def rename(self, oldkey, newkey):
        """Rename a key, overwriting newkey if it exists."""
        self.execute("RENAME", oldkey, newkey)
        return True

    def renamenx(self, oldkey, newkey):
        """
        Rename a key only if newkey does not exist yet.
        Returns False when newkey is already taken; raises SentinelError when
        oldkey is missing or both names are the same.
        """
        return self.execute("RENAMENX", oldkey, newkey, subject=oldkey) == 1

    def __contains__(self, key):
        return self.exists(key)

    def __delitem__(self, key):
        self.delete(key)
