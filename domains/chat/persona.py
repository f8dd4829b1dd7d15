"""Chatbot personality loaded from JSON."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Persona:
    """Role description, persona attributes and example interactions."""
    role: str
    persona: Any
    interactions: Any

    @classmethod
    def load(cls, path: Path) -> "Persona":
        """Read a personality file with `role`, `persona` and `interactions` keys."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(
            role=data["role"],
            persona=data.get("persona", {}),
            interactions=data.get("interactions", [])
        )

    @property
    def system_prompt(self) -> str:
        return "\n".join([
            self.role,
            json.dumps(self.persona, indent=2),
            json.dumps(self.interactions, indent=2),
        ])
