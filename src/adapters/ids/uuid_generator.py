"""UUID identifier generator - Implements IdGenerator protocol."""

import uuid


class UuidIdGenerator:
    """Random UUID4 identifiers, rendered in canonical string form."""

    def generate(self) -> str:
        return str(uuid.uuid4())
