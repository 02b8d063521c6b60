from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Produces candidate user IDs"""

    @abstractmethod
    async def generate(self) -> str:
        pass
