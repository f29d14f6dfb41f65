import json

from itemdb import InputError

def read_file(path):
    try:
        with open(path, 'r', encoding = 'utf-8') as f:
            return f.read()
    except OSError as e:
        raise InputError('Unable to read input file "{}": {}'.format(path, e))

def read_json(path):
    contents = read_file(path)
    try:
        return json.loads(contents)
    except ValueError as e:
        raise InputError('Unable to parse json file "{}": {}'.format(path, e))

def int_list(values, source):
    try:
        return [ int(v) for v in values ]
    except (TypeError, ValueError) as e:
        raise InputError('Invalid id list in {}: {}'.format(source, e))
