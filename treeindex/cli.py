"""Command-line entry points: interactive search and tree statistics."""

from __future__ import annotations

import sys
from time import perf_counter
from typing import Iterator, Optional, Sequence, TextIO

from .documents import Document, DocumentError, read_documents
from .export import export_to_csv
from .stats import TreeStats, make_tree, tree_stats

_TREE_TYPES = ("bst", "avl", "rbt")

_NO_COMMAND = (
    "Erro: Nenhum comando fornecido. Estrutura esperada: ./<arvore> "
    "<comando> <n_docs> <diretorio>\n"
)
_SEARCH_USAGE = "Erro, estrutura esperada: \n./<arvore> search <n_docs> <diretorio>"
_STATS_USAGE = "Erro, estrutura esperada: \n./<arvore> stats <n_docs> <diretorio>\n"
_TREE_STATS_USAGE = (
    "Erro: Comando invalido.\nUso: ./src/output/tree_stats <arvore> "
    "<n_max_docs> <n_points> <diretorio>\n"
)


def _number(value: float) -> str:
    return format(value, "g")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _parse_count(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Erro: numero invalido: {text}") from None


def _load(n_docs: int, path: str) -> list[Document]:
    return read_documents(n_docs, path)


def _search(tree_type: str, args: Sequence[str], stdin: TextIO, out: TextIO) -> int:
    if len(args) != 3:
        out.write(_SEARCH_USAGE)
        return 0
    n_docs = _parse_count(args[1])
    path = args[2]

    out.write("Leitura dos documentos iniciada...\n")
    docs = _load(n_docs, path)
    tree = make_tree(tree_type)
    for document in docs:
        for word in document.content:
            tree.insert(word, document.doc_id)

    tokens = _tokens(stdin)
    repeat = "s"
    while repeat == "s":
        out.write(
            "Indexacao das palavras concluida!\nDigite a que voce quer buscar: "
        )
        out.flush()
        word = next(tokens, "")
        result = tree.search(word)

        out.write("Encontrou? ")
        if result.found:
            ids = ", ".join(str(doc_id) for doc_id in result.document_ids)
            out.write(f"SIM! ;)\nIDs dos documentos: {{ {ids} }}\n")
        else:
            out.write("NAO! :/\n")
        out.write(
            f"Tempo de execucao: {_number(result.execution_time)} ms\n"
            f"Numero de comparacoes: {result.num_comparisons}\n"
        )
        out.write(
            "Deseja continuar buscando? digite: 's' para sim ou 'n' para sair: \n"
        )
        out.flush()
        repeat = next(tokens, "")
    return 0


def _format_stats(read_time: float, stats: TreeStats) -> str:
    return (
        "=========Estatisticas=========\n"
        f"Tempo de leitura dos documentos: {_number(read_time)} ms\n"
        "==========Insercao==========\n"
        f"Tempo total de insercao: {_number(stats.execution_time_insertion)} ms\n"
        f"Tempo medio de insercao: {_number(stats.execution_time_insertion_mean)} ms\n"
        "Numero total de comparacoes para insercao: "
        f"{stats.num_comparisons_insertion}\n"
        "Numero medio de comparacoes para insercao: "
        f"{stats.num_comparisons_insertion_mean}\n"
        "===========Busca===========\n"
        f"Numero medio de comparacoes para busca: {stats.num_comparisons_search_mean}\n"
        f"Numero maximo de comparacoes para busca: {stats.num_comparisons_search_max}\n"
        f"Tempo medio de busca: {_number(stats.execution_time_search_mean)} ms\n"
        f"Tempo maximo de busca: {_number(stats.execution_time_search_max)} ms\n"
        "===========Outros===========\n"
        f"Altura da arvore: {stats.tree_height}\n"
        f"Comprimento do maior galho: {stats.tree_height}\n"
        f"Comprimento do menor galho: {stats.min_branch}\n"
        f"Quantidade de palavras/nodes: {stats.num_nodes}\n"
    )


def _stats(tree_type: str, args: Sequence[str], out: TextIO) -> int:
    if len(args) != 3:
        out.write(_STATS_USAGE)
        return 0
    n_docs = _parse_count(args[1])
    path = args[2]

    out.write("Leitura dos documentos iniciada...\n")
    start = perf_counter()
    docs = _load(n_docs, path)
    read_time = (perf_counter() - start) * 1000.0

    stats = tree_stats(tree_type, n_docs, n_docs, docs)
    out.write(_format_stats(read_time, stats))
    return 0


def run(
    tree_type: str,
    argv: Sequence[str],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run the 'search' or 'stats' command on a tree of the given type.

    argv holds the arguments after the program name. Returns the exit status.
    """
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    args = list(argv)
    if not args:
        out.write(_NO_COMMAND)
        return 1
    command = args[0]
    try:
        if command == "search":
            return _search(tree_type, args, stdin, out)
        if command == "stats":
            return _stats(tree_type, args, out)
    except (DocumentError, ValueError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


def _arguments(argv: Optional[Sequence[str]]) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def bst_main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the plain binary search tree index."""
    return run("bst", _arguments(argv))


def avl_main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the AVL tree index."""
    return run("avl", _arguments(argv))


def rbt_main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the red-black tree index."""
    return run("rbt", _arguments(argv))


def _sample_points(n_max_docs: int, n_points: int) -> list[int]:
    step = max(1, int(n_max_docs / n_points))
    points = []
    for i in range(1, n_points + 1):
        value = i * step
        if value > n_max_docs:
            break
        points.append(value)
    if not points or points[-1] != n_max_docs:
        points.append(n_max_docs)
    return points


def stats_main(argv: Optional[Sequence[str]] = None) -> int:
    """Measure a tree type over growing document counts and export a CSV."""
    args = _arguments(argv)
    if len(args) < 4:
        sys.stdout.write(_TREE_STATS_USAGE)
        return 1
    tree_type = args[0]
    try:
        n_max_docs = _parse_count(args[1])
        n_points = _parse_count(args[2])
        if n_points <= 0:
            raise ValueError("Erro: n_points deve ser positivo.")
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    path = args[3]

    print("Leitura dos documentos iniciada...")
    try:
        docs = read_documents(n_max_docs, path)
    except DocumentError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    points = _sample_points(n_max_docs, n_points)

    if tree_type not in _TREE_TYPES:
        print("Erro: Tipo de arvore invalido. Use 'bst', 'avl' ou 'rbt'.")
        return 1

    print(f"Criando arvores binarias de busca ({tree_type})...")
    collected = [tree_stats(tree_type, n, n_max_docs, docs[:n]) for n in points]

    export_to_csv(collected, f"dados_{tree_type}.csv")
    return 0