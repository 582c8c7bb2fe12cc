from flask import Blueprint, request
from utils import *
import utils
from errors import FunctionNotFoundError, InvalidArgumentError, StoreWriteError
from functions import execute_function, list_functions

# Registers the bundled functions
import bulk_put  # noqa: F401


function_ops = Blueprint('function_operations', __name__)


@function_ops.route(FUNCTIONS_PATH, methods=['GET'])
def get_functions():
    print(f'GET {FUNCTIONS_PATH}')
    return {'functions': list_functions()}, 200


@function_ops.route(REGION_FUNCTIONS_PATH + '/<function_id>', methods=['POST'])
def post_region_function(name, function_id):
    '''
    Executes a registered function against the named region.
    No result is returned when the function fails.
    '''
    print(f'POST /region/{name}/functions/{function_id}')
    region = utils.get_region(name)
    if region is None:
        return {"error": "unknown region", "region": name}, 404

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {"error": "bad request"}, 400
    arguments = data.get('arguments')
    if not isinstance(arguments, list):
        return {"error": "bad request"}, 400

    try:
        results = execute_function(function_id, region, arguments)
    except FunctionNotFoundError:
        return {"error": "unknown function", "function": function_id}, 404
    except InvalidArgumentError as e:
        return {"error": "invalid arguments", "detail": str(e)}, 400
    except StoreWriteError as e:
        return {
            "error": "store write failed",
            "key": e.key,
            "detail": e.reason
        }, 503
    return {'result': results}, 200
