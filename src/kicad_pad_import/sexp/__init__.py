"""S-expression tokenizer, parser and document loader for footprint files."""

from .document import Document
from .parser import TreeNode, parse, parse_node
from .tokenizer import END_OF_INPUT, END_OF_LIST, LIST_START, Signal, Token, Tokenizer

__all__ = [
    "END_OF_INPUT",
    "END_OF_LIST",
    "LIST_START",
    "Document",
    "Signal",
    "Token",
    "Tokenizer",
    "TreeNode",
    "parse",
    "parse_node",
]
