from flask import Blueprint, request
from utils import *
import utils
from errors import QueryError, StoreWriteError


region_ops = Blueprint('region_operations', __name__)


def unknown_region(name):
    return {"error": "unknown region", "region": name}, 404


@region_ops.route(REGION_DATA_PATH + '/<key>', methods=['PUT'])
def put_region_data_key(name, key):
    print(f'PUT /region/{name}/data/{key}')
    region = utils.get_region(name)
    if region is None:
        return unknown_region(name)

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'val' not in data:  # Does not contain required information
        return {"error": "bad request"}, 400
    code = 200 if key in region else 201
    try:
        region.put(key, data['val'])
    except StoreWriteError as e:
        return {"error": e.reason, "key": key}, 400
    return {'message': 'OK'}, code


@region_ops.route(REGION_DATA_PATH + '/<key>', methods=['GET'])
def get_region_data_key(name, key):
    print(f'GET /region/{name}/data/{key}')
    region = utils.get_region(name)
    if region is None:
        return unknown_region(name)
    if key not in region:
        return {"error": "key not found"}, 404
    return {'val': region.get(key)}, 200


@region_ops.route(REGION_DATA_PATH + '/<key>', methods=['DELETE'])
def delete_region_data_key(name, key):
    print(f'DELETE /region/{name}/data/{key}')
    region = utils.get_region(name)
    if region is None:
        return unknown_region(name)
    if not region.remove(key):
        return {"error": "key not found"}, 404
    return {'message': 'OK'}, 200


@region_ops.route(REGION_DATA_PATH, methods=['GET'])
def get_region_data(name):
    print(f'GET /region/{name}/data')
    region = utils.get_region(name)
    if region is None:
        return unknown_region(name)
    ret_keys = region.keys()
    ret_body = {
        'region': name,
        'keys': ret_keys,
        'count': len(ret_keys)
    }
    return ret_body, 200


@region_ops.route(REGION_DATA_PATH, methods=['DELETE'])
def delete_region_data(name):
    print(f'DELETE /region/{name}/data')
    region = utils.get_region(name)
    if region is None:
        return unknown_region(name)
    region.clear()
    return {'message': 'success'}, 200


@region_ops.route(REGION_QUERY_PATH, methods=['POST'])
def post_region_query(name):
    print(f'POST /region/{name}/query')
    region = utils.get_region(name)
    if region is None:
        return unknown_region(name)

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('query'), str):
        return {"error": "bad request"}, 400
    try:
        results = region.query(data['query'])
    except QueryError as e:
        return {"error": "bad query", "detail": str(e)}, 400
    return {'results': results, 'count': len(results)}, 200
