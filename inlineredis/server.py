import logging

from .codec import ValueKind
from .encoder import encode_command
from .errors import RedisTimeoutError, TransportError

logger = logging.getLogger(__name__)


def parse_info(text):
    """Turn the ``name:value`` lines of an INFO reply into a dict."""
    info = {}
    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue
        name, _, value = line.partition(":")
        info[name] = value
    return info


class ServerCommands:

    def select(self, index):
        """Change the selected database for the current connection."""
        self.execute("SELECT", index)
        return True

    def move(self, key, index):
        """
        Move a key to another database. False when the key was missing or the
        target already had it; raises SentinelError for the same database or
        an index out of range.
        """
        return self.execute("MOVE", key, index, subject=key) == 1

    def save(self):
        """Synchronously save the database to disk."""
        self.execute("SAVE")
        return True

    def bgsave(self):
        """Save the database to disk in the background."""
        self.execute("BGSAVE")
        return True

    def lastsave(self):
        """Return the UNIX time of the last successful save."""
        return self.execute("LASTSAVE")

    def flushdb(self):
        """Remove all keys from the selected database."""
        self.execute("FLUSHDB")
        return True

    def info(self):
        """Get server information and statistics."""
        return parse_info(self.execute("INFO", as_=ValueKind.TEXT) or "")

    def sort(self, key, by=None, get=None, incr=None, decr=None, delete=None,
             order=None, limit=None, as_=ValueKind.AUTO):
        """
        Sort the elements of a list or set.

        ``order`` is passed through as-is (e.g. ``"DESC ALPHA"``) and ``limit``
        is a ``(start, count)`` pair.
        """
        args = [key]
        if by:
            args.extend(["BY", by])
        if get:
            args.extend(["GET", get])
        if incr:
            args.extend(["INCR", incr])
        if delete:
            args.extend(["DEL", delete])
        if decr:
            args.extend(["DECR", decr])
        if order:
            args.append(order)
        if limit:
            args.append("LIMIT")
            args.extend(limit)
        return self.execute("SORT", *args, as_=as_)

    def quit(self):
        """Ask the server to close the connection, then close it here."""
        try:
            if self.connection.connected:
                with self.connection.deadline(self.executor.timeout):
                    self.connection.write(encode_command("QUIT"))
        except (TransportError, RedisTimeoutError) as e:
            logger.debug("ignoring error while quitting: %s", e)
        finally:
            self.connection.close()
