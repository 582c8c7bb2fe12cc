import json
import re
import threading

from errors import QueryError, StoreWriteError
from utils import print

# SELECT [DISTINCT] * FROM /region
SELECT_VALUES = re.compile(
    r"^SELECT\s+(?P<distinct>DISTINCT\s+)?\*\s+FROM\s+/(?P<region>[\w-]+)$",
    re.IGNORECASE)
# SELECT [DISTINCT] entry.value FROM /region.entries entry WHERE entry.key = 'k'
SELECT_ENTRY_VALUE = re.compile(
    r"^SELECT\s+(?P<distinct>DISTINCT\s+)?(?P<alias>\w+)\.value\s+"
    r"FROM\s+/(?P<region>[\w-]+)\.entries\s+(?P=alias)"
    r"(?:\s+WHERE\s+(?P=alias)\.key\s*=\s*'(?P<key>(?:[^']|'')*)')?$",
    re.IGNORECASE)


def distinct(values):
    ''' Keeps the first of each equal value; values may be unhashable '''
    ret = []
    for value in values:
        if value not in ret:
            ret.append(value)
    return ret


class Region:
    '''
    In-memory key-value region.
    Keys are strings, values anything JSON can carry.
    '''

    def __init__(self, name, max_value_size=8000000):
        self.name = name
        self.max_value_size = max_value_size
        self._data = {}
        self._lock = threading.Lock()
        self._put_callbacks = []
        self._interest = False

    def put(self, key, value):
        if not isinstance(key, str):
            raise StoreWriteError(key, 'key must be a string')
        try:
            encoded = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StoreWriteError(key, f'value is not serializable ({e})')
        if len(encoded) > self.max_value_size:
            raise StoreWriteError(key, 'val too large')
        with self._lock:
            self._data[key] = value
            callbacks = list(self._put_callbacks) if self._interest else []
        # The value is stored; a failing listener does not undo the put
        for callback in callbacks:
            try:
                callback(key, value)
            except Exception as e:
                print(f'put listener failed on region {self.name}, key {key}: {e!r}')
        return value

    def get(self, key, default=None):
        with self._lock:
            return self._data.get(key, default)

    def remove(self, key):
        ''' Returns whether the key was present '''
        with self._lock:
            if key not in self._data:
                return False
            del self._data[key]
            return True

    def clear(self):
        with self._lock:
            self._data.clear()
        return True

    def keys(self):
        with self._lock:
            return list(self._data.keys())

    def size(self):
        with self._lock:
            return len(self._data)

    def __contains__(self, key):
        with self._lock:
            return key in self._data

    def query(self, text):
        '''
        Runs a query over this region's values. Two shapes are understood:

            SELECT [DISTINCT] * FROM /region
            SELECT [DISTINCT] entry.value FROM /region.entries entry
                [WHERE entry.key = 'k']

        Results come back in insertion order.
        '''
        text = (text or '').strip()
        match = SELECT_VALUES.match(text) or SELECT_ENTRY_VALUE.match(text)
        if match is None:
            raise QueryError(f'unsupported query: {text!r}')
        if match.group('region') != self.name:
            raise QueryError(f'query targets /{match.group("region")}, not /{self.name}')

        key = match.groupdict().get('key')
        with self._lock:
            if key is None:
                values = list(self._data.values())
            else:
                key = key.replace("''", "'")
                values = [self._data[key]] if key in self._data else []
        if match.group('distinct'):
            values = distinct(values)
        return values

    # Put listeners only fire while interest is registered
    def register_all_keys(self):
        self._interest = True
        return True

    def unregister_all_keys(self):
        self._interest = False
        return True

    def on_put(self, callback):
        with self._lock:
            self._put_callbacks.append(callback)
        return True
