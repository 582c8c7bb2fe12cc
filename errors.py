class InvalidArgumentError(Exception):
    ''' Function arguments are malformed (wrong arity or wrong type) '''
    pass


class StoreWriteError(Exception):
    ''' The region rejected a write '''

    def __init__(self, key, reason):
        super().__init__(f'unable to put key {key!r}: {reason}')
        self.key = key
        self.reason = reason


class FunctionNotFoundError(Exception):
    pass


class QueryError(Exception):
    ''' Query text is not understood or targets another region '''
    pass
