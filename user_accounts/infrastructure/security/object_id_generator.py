# External package imports
from bson import ObjectId

# Local application imports
from ...domain.ports.id_generator import IdGenerator


class ObjectIdGenerator(IdGenerator):
    """IdGenerator producing MongoDB ObjectId hex strings"""

    async def generate(self) -> str:
        return str(ObjectId())
