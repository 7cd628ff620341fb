"""Core modules for textstats: documents, tokenization, sentence splitting."""

from .documents import Document, load_text_files, load_tsv
from .text_splitter import TextSplitter
from .tokenizer import Token, tokenize, tokenize_corpus

__all__ = [
    "Document",
    "load_text_files",
    "load_tsv",
    "TextSplitter",
    "Token",
    "tokenize",
    "tokenize_corpus",
]
