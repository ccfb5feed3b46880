# -*- coding: utf-8 -*-
"""
Id generation capabilities.

Documents and list entities receive ids from an injected generator so tests
can supply deterministic values. Local database records use the
``bp_<epoch ms>_<random base36>`` format of the browser build.
"""

import random
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Optional

from utils.datetime_utils import to_epoch_ms, utc_now
from utils.helpers import to_base36


class IdGenerator(ABC):
    """Produces unique string ids."""

    @abstractmethod
    def new_id(self) -> str:
        pass

    def __call__(self) -> str:
        return self.new_id()


class UuidIdGenerator(IdGenerator):
    """Random UUID4 ids (default)."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator(IdGenerator):
    """
    Deterministic ids for tests: ``<prefix>-1``, ``<prefix>-2``, ...
    """

    def __init__(self, prefix: str = "id", start: int = 1):
        self.prefix = prefix
        self._next = start

    def new_id(self) -> str:
        value = f"{self.prefix}-{self._next}"
        self._next += 1
        return value


def generate_record_id(
    clock: Callable[[], datetime] = utc_now,
    rng: Optional[random.Random] = None
) -> str:
    """
    Generate a local database record id.

    Format: ``bp_<epoch ms>_<9 base36 chars>``
    Example: bp_1735689600000_k3j9x0a1q
    """
    rng = rng or random.SystemRandom()
    suffix = "".join(to_base36(rng.randrange(36)) for _ in range(9))
    return f"bp_{to_epoch_ms(clock())}_{suffix}"
