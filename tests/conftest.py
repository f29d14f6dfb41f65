import os, sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from itemdb.config import filter_config
from itemdb.db import WowDatabase

@pytest.fixture
def cfg():
    return filter_config(
        item_deny_ids = [ 900 ],
        gem_deny_ids = [ 40900 ],
        item_allow_ids = [ 700 ],
        gem_allow_ids = [ 30100 ],
        name_deny_regexes = [ '^Test', 'zzOLD' ])

@pytest.fixture
def db():
    return WowDatabase()
