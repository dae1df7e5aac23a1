"""Reading documents from a directory into lists of distinct words."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from typing import Iterable

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class DocumentError(Exception):
    """Raised when documents cannot be read."""


@dataclass
class Document:
    """A document id together with its distinct words in reading order."""

    doc_id: int
    content: list[str] = field(default_factory=list)
    _seen: set[str] = field(default_factory=set, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._seen = set(self.content)

    def contains(self, word: str) -> bool:
        """Whether the word is already among the document's words."""
        return word in self._seen

    def add_word(self, word: str) -> bool:
        """Append the word unless present; return whether it was added."""
        if word in self._seen:
            return False
        self._seen.add(word)
        self.content.append(word)
        return True


def _document_id(filename: str) -> int:
    match = _LEADING_INT.match(filename)
    if match is None:
        raise DocumentError(f"Nome de arquivo sem ID numerico: {filename}")
    return int(match.group(1))


def read_documents(num_docs: int, dir_path: str | os.PathLike[str]) -> list[Document]:
    """Read the first num_docs files of a directory, named by numeric id."""
    if num_docs < 0:
        raise ValueError("num_docs must not be negative")
    try:
        entries = sorted(os.scandir(dir_path), key=lambda entry: entry.name)
    except OSError as exc:
        raise DocumentError(f"Erro ao abrir o diretorio: {dir_path}") from exc

    if len(entries) < num_docs:
        raise DocumentError("Erro: menos documentos no diretorio do que o esperado.")

    documents = []
    for entry in entries[:num_docs]:
        try:
            with open(entry.path, encoding="utf-8", errors="surrogateescape") as file:
                text = file.read()
        except OSError as exc:
            raise DocumentError(f"Erro ao abrir o arquivo: {entry.path}") from exc
        document = Document(_document_id(entry.name))
        for word in text.split():
            document.add_word(word)
        documents.append(document)
    return documents


def format_documents(documents: Iterable[Document]) -> str:
    """Render each document as 'Documento <index>: word word ...'."""
    return "".join(
        f"Documento {index}: " + "".join(f"{word} " for word in document.content) + "\n"
        for index, document in enumerate(documents)
    )


def print_documents(documents: Iterable[Document]) -> None:
    """Write the documents to standard output."""
    sys.stdout.write(format_documents(documents))