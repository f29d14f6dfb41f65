import collections, configparser, logging, os, re

from itemdb import constants, ConfigurationError

# Immutable filter configuration handed to the filter pipeline
FilterConfig = collections.namedtuple('FilterConfig', [
    'item_deny_ids', 'gem_deny_ids',
    'item_allow_ids', 'gem_allow_ids',
    'name_deny_regexes',
    'max_ilvl', 'min_gem_id', 'duplicate_set_ilvl',
])

def filter_config(**kwargs):
    cfg = FilterConfig(
        item_deny_ids      = frozenset(kwargs.get('item_deny_ids', constants.ITEM_DENY_LIST)),
        gem_deny_ids       = frozenset(kwargs.get('gem_deny_ids', constants.GEM_DENY_LIST)),
        item_allow_ids     = frozenset(kwargs.get('item_allow_ids', constants.ITEM_ALLOW_LIST)),
        gem_allow_ids      = frozenset(kwargs.get('gem_allow_ids', constants.GEM_ALLOW_LIST)),
        name_deny_regexes  = tuple(
            isinstance(p, str) and re.compile(p) or p
                for p in kwargs.get('name_deny_regexes', constants.NAME_DENY_REGEXES)),
        max_ilvl           = kwargs.get('max_ilvl', constants.MAX_ITEM_LEVEL),
        min_gem_id         = kwargs.get('min_gem_id', constants.MIN_GEM_ID),
        duplicate_set_ilvl = kwargs.get('duplicate_set_ilvl', constants.DUPLICATE_SET_ITEM_LEVEL),
    )

    return cfg

def parse_ids(value):
    try:
        return [ int(v) for v in value.replace(',', ' ').split() ]
    except ValueError as e:
        raise ConfigurationError('Invalid id list "{}": {}'.format(value, e))

# Build configuration. Paths come from the command line options, and can be
# overridden by an optional ini file:
#
# [general]
# input_base  = assets/db_inputs
# output_base = assets/database
# talent_base = ui/core/talents/trees
#
# [items]
# deny  = 12345 23456
# allow = 34567
#
# [gems]
# deny  = ...
# allow = ...
class Config:
    def __init__(self, options):
        self.options = options

        self.input_base = options.inputs
        self.output_base = options.output
        self.talent_base = options.talents

        self.extra = {
            'items': { 'deny': [], 'allow': [] },
            'gems' : { 'deny': [], 'allow': [] },
        }

    def input_file(self, file_name):
        return os.path.join(self.input_base, file_name)

    def output_file(self, file_name):
        return os.path.join(self.output_base, file_name)

    def open(self):
        config_file = getattr(self.options, 'config', None)
        if config_file:
            config = configparser.ConfigParser()
            if not config.read(config_file):
                logging.error('Unable to read configuration file "%s"', config_file)
                return False

            for section in config.sections():
                if section == 'general':
                    self.input_base = config.get('general', 'input_base', fallback = self.input_base)
                    self.output_base = config.get('general', 'output_base', fallback = self.output_base)
                    self.talent_base = config.get('general', 'talent_base', fallback = self.talent_base)
                elif section in self.extra:
                    for key in ('deny', 'allow'):
                        self.extra[section][key] += parse_ids(config.get(section, key, fallback = ''))
                else:
                    logging.warning('Unknown configuration section "%s" in %s', section, config_file)

        if not self.input_base or not os.path.isdir(self.input_base):
            logging.error('Input directory "%s" does not exist', self.input_base)
            return False

        if not self.output_base:
            logging.error('No output directory given')
            return False

        os.makedirs(self.output_base, exist_ok = True)
        if not os.access(self.output_base, os.W_OK):
            logging.error('Cannot output to "%s", directory not writable', self.output_base)
            return False

        return True

    def filter_config(self):
        return filter_config(
            item_deny_ids  = constants.ITEM_DENY_LIST + self.extra['items']['deny'],
            item_allow_ids = constants.ITEM_ALLOW_LIST + self.extra['items']['allow'],
            gem_deny_ids   = constants.GEM_DENY_LIST + self.extra['gems']['deny'],
            gem_allow_ids  = constants.GEM_ALLOW_LIST + self.extra['gems']['allow'])
