import builtins
import os

current_address = os.getenv('ADDRESS')

# Configuration
DEFAULT_REGION = 'exampleRegion'
DEFAULT_MAX_VAL_SIZE = 8000000  # 8MB, 1 char = 1 byte

# Global variables


def init():
    from region import Region
    global regions
    regions = {}  # { region_name: Region }
    global max_val_size
    max_val_size = int(os.getenv('MAX_VAL_SIZE', DEFAULT_MAX_VAL_SIZE))
    for name in region_names():
        regions[name] = Region(name, max_value_size=max_val_size)


def region_names():
    ''' Region names to create on startup, from REGION_NAMES '''
    names = os.getenv('REGION_NAMES', DEFAULT_REGION)
    return [name.strip() for name in names.split(',') if name.strip()]


def get_region(name):
    return regions.get(name)


# Paths
REGION_PATH = '/region/<name>'
REGION_DATA_PATH = REGION_PATH + '/data'
REGION_FUNCTIONS_PATH = REGION_PATH + '/functions'
REGION_QUERY_PATH = REGION_PATH + '/query'
FUNCTIONS_PATH = '/functions'


def format_url(address, path):
    return f'http://{address}{path}'


def region_data_path(region_name, key=None):
    path = f'/region/{region_name}/data'
    if key is not None:
        path += f'/{key}'
    return path


def region_function_path(region_name, function_id):
    return f'/region/{region_name}/functions/{function_id}'


def print(*objs, **kwargs):
    my_prefix = f'{current_address}: '
    builtins.print(my_prefix, *objs, **kwargs)


def region_query_path(region_name):
    return f'/region/{region_name}/query'
