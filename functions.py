from utils import print
from errors import FunctionNotFoundError

# Registered functions
functions = {}  # { function_id: Function }


class ResultSender:
    ''' One-shot channel a function reports its results through '''

    def __init__(self):
        self.results = []
        self.done = False

    def send_result(self, value):
        if self.done:
            raise RuntimeError('last result already sent')
        self.results.append(value)

    def last_result(self, value):
        self.send_result(value)
        self.done = True


class FunctionContext:
    def __init__(self, arguments, data_region, result_sender=None):
        self.arguments = arguments
        self.data_region = data_region
        self.result_sender = result_sender if result_sender is not None else ResultSender()

    def send_final_result(self, value):
        self.result_sender.last_result(value)


class Function:
    '''
    Base for server-side functions.
    Subclasses implement execute(context).
    '''

    def execute(self, context):
        raise NotImplementedError

    def get_id(self):
        cls = type(self)
        return f'{cls.__module__}.{cls.__qualname__}'


def register_function(fn):
    function_id = fn.get_id()
    if function_id in functions:
        raise ValueError(f'function {function_id} already registered')
    functions[function_id] = fn
    return fn


def unregister_function(function_id):
    functions.pop(function_id, None)


def get_function(function_id):
    if function_id not in functions:
        raise FunctionNotFoundError(function_id)
    return functions[function_id]


def list_functions():
    return sorted(functions.keys())


def execute_function(function_id, region, arguments):
    ''' Runs a registered function against region, returns the results it sent '''
    fn = get_function(function_id)
    context = FunctionContext(arguments, region)
    print(f'executing {function_id} on region {region.name}')
    try:
        fn.execute(context)
    except Exception as e:
        print(f'{function_id} failed: {e}')
        raise
    if not context.result_sender.done:
        print(f'{function_id} returned without a last result')
    return context.result_sender.results
