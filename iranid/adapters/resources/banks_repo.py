import re
from typing import List, Optional

from iranid.adapters.resources.core import ReferenceCollection, require_pattern, require_text
from iranid.common.utils import normalize_persian
from iranid.config.settings import Config
from iranid.domain.bank import Bank

BANK_CODE_PATTERN = re.compile(r'0[0-9]{2}')
BIN_PATTERN = re.compile(r'[0-9]{6}')


def map_bank(item: dict) -> Bank:
    return Bank(
        id=require_text(item['id'], 'bank id'),
        name=require_text(item['name'], 'bank name'),
        persian_name=normalize_persian(require_text(item['persianName'], 'bank persianName')),
        codes=require_pattern(item.get('codes', []), BANK_CODE_PATTERN, 'bank code'),
        bins=require_pattern(item.get('bins', []), BIN_PATTERN, 'bin'),
    )


# Shared, loaded on first lookup
BANKS = ReferenceCollection(Config.BANKS_DATA_PATH, map_bank)


class BankRepository:
    def __init__(self, collection: ReferenceCollection | None = None):
        self.collection = collection if collection is not None else BANKS

    def get_all(self) -> List[Bank]:
        return list(self.collection.records)

    def get_by_id(self, bank_id: str) -> Optional[Bank]:
        return self.collection.find_by(lambda bank: bank.id == bank_id)

    def find_by_bin(self, bin_: str) -> Optional[Bank]:
        return self.collection.find_by(lambda bank: bank.has_bin(bin_))

    def find_by_code(self, code: str) -> Optional[Bank]:
        return self.collection.find_by(lambda bank: bank.has_code(code))
