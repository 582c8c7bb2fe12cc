from flask import Flask
from utils import *
from region_operations import region_ops
from function_operations import function_ops

app = Flask(__name__)

app.register_blueprint(region_ops)
app.register_blueprint(function_ops)


@app.route('/')
def index():
    print('GET /')
    return '<h1>At Index</h1>'
