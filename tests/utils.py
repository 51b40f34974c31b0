import asyncio
import json
from typing import Any, Dict, List

from app.ai.llm.base import GenerationEngine
from app.storage.base import KeyValueStoreError
from app.storage.memory import MemoryKeyValueStore


class FakeEngine(GenerationEngine):
    """Scripted generator. Each invoke() pops the next response."""

    def __init__(self, *responses: Any):
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    async def invoke(self, prompt, variables, media):
        self.calls.append({"prompt": prompt, "variables": variables, "media": media})
        response = self.responses.pop(0) if self.responses else None
        if isinstance(response, Exception):
            raise response
        return response


def mcq_output(count: int = 3) -> str:
    return json.dumps({
        "testTitle": "Newton's Laws",
        "questions": [
            {
                "kind": "mcq",
                "questionText": f"Question {i}?",
                "options": ["A", "B", "C", "D"],
                "correctOptionIndex": i % 4,
                "explanation": "Because.",
            }
            for i in range(count)
        ],
    })


class SlowStore(MemoryKeyValueStore):
    """Gives up control on every read and write, like a network backend."""

    def __init__(self):
        super().__init__()
        self.writes = 0

    async def get(self, key):
        await asyncio.sleep(0)
        return await super().get(key)

    async def set(self, key, value):
        await asyncio.sleep(0)
        self.writes += 1
        await super().set(key, value)


class BrokenStore(MemoryKeyValueStore):
    """Reads work, every write fails."""

    async def set(self, key, value):
        raise KeyValueStoreError(f"Failed to write key {key}")
