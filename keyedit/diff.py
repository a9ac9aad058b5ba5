from __future__ import annotations

import logging
from collections import Counter
from typing import List, Sequence, Union

from keyedit.edit_list import Edit, EditList, Key

log = logging.getLogger(__name__)


def keys(document: Union[str, Sequence[Key]]) -> List[Key]:
    if isinstance(document, str):
        return document.split()
    return list(document)


def diff(a: Union[str, Sequence[Key]], b: Union[str, Sequence[Key]]) -> List[Edit]:
    edits = EditList.diff(keys(a), keys(b))
    log.debug("computed %d edits", len(edits))
    return edits


def duplicates(items: Sequence[Key]) -> List[Key]:
    counts = Counter(items)
    return [key for key, count in counts.items() if count > 1]
