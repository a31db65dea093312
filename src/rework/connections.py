from importlib import resources
from functools import cache

class TransliterationDataSource:
    @classmethod
    @cache
    def csv_path(cls):
        """ Letters without an ASCII decomposition """
        return resources.files('rework.data').joinpath('transliterations.csv')
