# wordpass engine services
from wordpass.services.assembler import SeparatorKind, SeparatorSpec, assemble, parse_separator
from wordpass.services.generator import generate, generate_words
from wordpass.services.sampler import WordCursor, shuffle
from wordpass.services.selector import assembled_length, pick, pick_by_length

__all__ = [
    "SeparatorKind", "SeparatorSpec", "assemble", "parse_separator",
    "generate", "generate_words",
    "WordCursor", "shuffle",
    "assembled_length", "pick", "pick_by_length",
]
