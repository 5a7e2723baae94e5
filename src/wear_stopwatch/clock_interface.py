from abc import ABC, abstractmethod

class ClockInterface(ABC):
    @abstractmethod
    def nowMillis(self) -> int:
        '''
        May step backward, e.g. after a system clock adjustment.
        '''
        raise NotImplementedError

    @abstractmethod
    async def sleep(self, seconds: float) -> None:
        raise NotImplementedError
