from pydantic import BaseModel
from typing import List, Optional


class InstructionStep(BaseModel):
    number: Optional[int] = None
    step: str


class AnalyzedInstruction(BaseModel):
    name: Optional[str] = None
    steps: List[InstructionStep]


def instruction_lines(sections: List[AnalyzedInstruction]) -> List[str]:
    """Flatten analyzed instruction sections into display lines.

    A section with a non-blank name contributes a ``=== name ===`` header
    ahead of its steps. Section order and step order are preserved.
    """
    lines: List[str] = []
    for section in sections:
        if section.name and section.name.strip():
            lines.append(f"=== {section.name} ===")
        lines.extend(step.step for step in section.steps)
    return lines
