import requests

from utils import (DEFAULT_REGION, FUNCTIONS_PATH, format_url, region_data_path,
                   region_function_path, region_query_path)


class GridClient:
    '''
    Talks to one region server over HTTP.

    Errors surface as requests.HTTPError from raise_for_status, except get(),
    which returns None for a missing key.
    '''

    def __init__(self, address, region=DEFAULT_REGION, timeout=20):
        self.address = address
        self.region = region
        self.timeout = timeout

    def _url(self, path):
        return format_url(self.address, path)

    def put(self, key, val):
        resp = requests.put(self._url(region_data_path(self.region, key)),
                            json={'val': val}, timeout=self.timeout)
        resp.raise_for_status()
        return val

    def get(self, key):
        resp = requests.get(self._url(region_data_path(self.region, key)), timeout=self.timeout)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return resp.json().get('val')

    def remove(self, key):
        resp = requests.delete(self._url(region_data_path(self.region, key)), timeout=self.timeout)
        if resp.status_code == 404:
            return False
        resp.raise_for_status()
        return True

    def keys(self):
        resp = requests.get(self._url(region_data_path(self.region)), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json().get('keys')

    def clear(self):
        resp = requests.delete(self._url(region_data_path(self.region)), timeout=self.timeout)
        resp.raise_for_status()
        return True

    def functions(self):
        resp = requests.get(self._url(FUNCTIONS_PATH), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json().get('functions')

    def execute_function(self, function_id, arguments):
        ''' Returns the list of results the function sent '''
        resp = requests.post(self._url(region_function_path(self.region, function_id)),
                             json={'arguments': list(arguments)}, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json().get('result')

    def query(self, text):
        resp = requests.post(self._url(region_query_path(self.region)),
                             json={'query': text}, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json().get('results')
