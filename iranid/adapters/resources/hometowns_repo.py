import re
from typing import List

from iranid.adapters.resources.core import ReferenceCollection, require_pattern, require_text
from iranid.common.utils import normalize_persian
from iranid.config.settings import Config
from iranid.domain.hometown import Hometown

HOMETOWN_CODE_PATTERN = re.compile(r'[0-9]{3}')


def map_hometown(item: dict) -> Hometown:
    return Hometown(
        province=normalize_persian(require_text(item['province'], 'province')),
        city=normalize_persian(require_text(item['city'], 'city')),
        codes=require_pattern(item['codes'], HOMETOWN_CODE_PATTERN, 'hometown code'),
    )


# Shared, loaded on first lookup
HOMETOWNS = ReferenceCollection(Config.HOMETOWNS_DATA_PATH, map_hometown)


class HometownRepository:
    def __init__(self, collection: ReferenceCollection | None = None):
        self.collection = collection if collection is not None else HOMETOWNS

    def get_all(self) -> List[Hometown]:
        return list(self.collection.records)

    def find_all_by_code(self, code: str) -> List[Hometown]:
        """A code can be shared by several hometowns; all of them are returned."""
        return self.collection.find_all_by(lambda hometown: hometown.has_code(code))

    def find_all_by_province(self, province: str) -> List[Hometown]:
        province = normalize_persian(province)
        return self.collection.find_all_by(lambda hometown: hometown.province == province)
