from typing import Any
from typing import Hashable
from typing import Iterable
from typing import Mapping

from docserializer.interfaces import Record


def pick(record: Mapping[Any, Any], keys: Iterable[Hashable]) -> Record:
    """
    New dict holding only `keys` of `record`; missing keys are skipped.
    """
    return {key: record[key] for key in keys if key in record}


def omit(record: Mapping[Any, Any], keys: Iterable[Hashable]) -> Record:
    """
    New dict holding everything in `record` except `keys`.
    """
    dropped = set(keys)
    return {key: value for key, value in record.items() if key not in dropped}
