from dataclasses import dataclass
from numbers import Real
from typing import Any

from errors import InvalidArgumentError
from functions import Function, register_function

KEY_PREFIX = 'foo'


@dataclass(frozen=True)
class BulkPutArgs:
    value: Any
    count: int

    @classmethod
    def from_arguments(cls, arguments):
        '''
        Validates the raw [value, count] argument list.
        count is truncated toward zero, so 2.9 puts two keys.
        '''
        if arguments is None or len(arguments) < 2:
            raise InvalidArgumentError('expected arguments [value, count]')
        count = arguments[1]
        # bool is an int subclass but not a count
        if isinstance(count, bool) or not isinstance(count, Real):
            raise InvalidArgumentError(f'count must be numeric, got {count!r}')
        try:
            count = int(count)
        except (ValueError, OverflowError):
            raise InvalidArgumentError(f'count must be finite, got {count!r}')
        return cls(value=arguments[0], count=count)


def key_for(i):
    return KEY_PREFIX + str(i)


def bulk_put(region, args):
    '''
    Puts args.value under foo0..foo{count-1}, in order.
    A StoreWriteError stops the loop; earlier puts stay.
    '''
    for i in range(args.count):
        region.put(key_for(i), args.value)
    return True


class BulkPut(Function):
    def execute(self, context):
        args = BulkPutArgs.from_arguments(context.arguments)
        context.send_final_result(bulk_put(context.data_region, args))


register_function(BulkPut())
