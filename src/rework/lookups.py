import logging
import pandas as pd
from functools import cache, cached_property
from keyword import iskeyword
from typing import Dict
from rework.connections import TransliterationDataSource

logger = logging.getLogger(__name__)

class TransliterationData(TransliterationDataSource):
    def __init__(self):
        with self.csv_path().open('r', encoding='utf-8') as f:
            data = pd.read_csv(f, dtype=str, keep_default_na=False)
            for column in data.columns:
                if not iskeyword(column):
                    setattr(self, column, data[column])
        logger.debug("Loaded %d transliterations", len(data))

    @cached_property
    def char_to_ascii(self) -> Dict[str, str]:
        return dict(zip(self.character, self.ascii))

@cache
def transliteration_table() -> Dict[int, str]:
    """Translation table for `str.translate` built from the packaged data.

    Covers letters such as 'ß' or 'ø' that Unicode NFKD decomposition
    leaves as non-ASCII characters.
    """
    return str.maketrans(TransliterationData().char_to_ascii)
