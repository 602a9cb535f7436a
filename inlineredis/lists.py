from .codec import ValueKind


class ListCommands:

    def rpush(self, key, value):
        """Append a value to a list."""
        self.execute("RPUSH", key, payload=value)
        return True

    def lpush(self, key, value):
        """Prepend a value to a list."""
        self.execute("LPUSH", key, payload=value)
        return True

    def lpop(self, key, as_=ValueKind.AUTO):
        """Remove and get the first element in a list."""
        return self.execute("LPOP", key, as_=as_)

    def rpop(self, key, as_=ValueKind.AUTO):
        """Remove and get the last element in a list."""
        return self.execute("RPOP", key, as_=as_)

    def lset(self, key, index, value):
        """Set the list element at index."""
        self.execute("LSET", key, index, payload=value)
        return True

    def llen(self, key):
        """Get the length of a list."""
        return self.execute("LLEN", key, subject=key)

    def lrange(self, key, start, end, as_=ValueKind.AUTO):
        """Get a range of elements from a list, both ends inclusive."""
        return self.execute("LRANGE", key, start, end, as_=as_)

    def ltrim(self, key, start, end):
        """Trim a list to the given range."""
        self.execute("LTRIM", key, start, end)
        return True

    def lindex(self, key, index, as_=ValueKind.AUTO):
        """Get an element from a list by its index."""
        return self.execute("LINDEX", key, index, as_=as_)

    def lrem(self, key, count, value):
        """Remove the first count occurrences of value. Returns how many were removed."""
        return self.execute("LREM", key, count, payload=value, subject=key)
