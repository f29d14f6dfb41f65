import io, json, logging, pathlib, sys

from itemdb import ItemDBError

# Writes a database as a json object with one entity per line, so that
# regenerated files diff cleanly
class DatabaseGenerator:
    def __init__(self, db):
        self._db = db
        self._out = None

    def set_output(self, obj):
        if isinstance(obj, io.IOBase):
            self._out = obj
        elif isinstance(obj, (str, pathlib.Path)):
            try:
                self._out = pathlib.Path(obj).open('w', encoding = 'utf-8')
            except OSError as e:
                raise ItemDBError('Unable to open output file "{}": {}'.format(obj, e))
        elif obj is None:
            self._out = sys.stdout

        return True

    def close(self):
        if self._out and self._out != sys.stdout:
            self._out.close()

    def output_collection(self, name, entries, last = False):
        self._out.write('"{}":['.format(name))
        if len(entries) > 0:
            self._out.write('\n')
            self._out.write(',\n'.join(json.dumps(e) for e in entries))
            self._out.write('\n')

        self._out.write(']{}\n'.format(not last and ',' or ''))

    def generate(self):
        data = self._db.to_dict()
        names = list(data.keys())

        self._out.write('{\n')
        for name in names:
            self.output_collection(name, data[name], name == names[-1])
        self._out.write('}\n')

def write_database(db, path):
    logging.info('Outputting %s to %s ...', db, path)

    generator = DatabaseGenerator(db)
    generator.set_output(path)
    try:
        generator.generate()
    finally:
        generator.close()
