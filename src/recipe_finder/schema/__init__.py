from .recipe_summary import RecipeSummary
from .instruction_schema import AnalyzedInstruction, InstructionStep, instruction_lines
__all__ = ["RecipeSummary", "AnalyzedInstruction", "InstructionStep", "instruction_lines"]
