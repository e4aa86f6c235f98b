from __future__ import annotations

from abc import ABC, abstractmethod

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class Command(ABC):
    @abstractmethod
    def run(self) -> int:
        raise NotImplementedError
