# treeindex

Builds an inverted index (word → list of document ids) from a directory of
text documents. The index can be a plain binary search tree, an AVL tree or a
red-black tree. The package also measures how each tree behaves: comparisons,
timings, height and branch lengths.

## Documents

Each document is a file in one directory. The file name starts with the
document's integer id, for example `12` or `12.txt`. Files are taken in order
of their names, compared as strings, and the first `n_docs` of them are read.
Words are separated by whitespace, and a word is recorded once per document.
If the directory holds fewer files than asked for, or a name has no leading
number, `treeindex.documents.read_documents` raises `DocumentError`, and the
commands print the message to standard error and exit with status 1.

## Install

    pip install .

## Interactive search

    treeindex-bst search <n_docs> <directory>
    treeindex-avl search <n_docs> <directory>
    treeindex-rbt search <n_docs> <directory>

These commands read the documents and index their words. They then ask for a
word and print whether it was found, the ids of the documents that contain it,
the search time in milliseconds and the number of comparisons. Enter `s` to
search again. Anything else, or the end of input, quits.

## Statistics for one tree

    treeindex-bst stats <n_docs> <directory>
    treeindex-avl stats <n_docs> <directory>
    treeindex-rbt stats <n_docs> <directory>

These commands print the following:

- the document reading time
- the total and mean insertion time and comparisons
- the mean and maximum search comparisons and times
- the tree height
- the shortest branch
- the number of distinct words

Every word in the tree is searched for. Each search is repeated 50 times when
fewer than 800 documents are used, and done once otherwise.

## Statistics over a range of sizes

    treeindex-stats <bst|avl|rbt> <n_max_docs> <n_points> <directory>

This reads `n_max_docs` documents. It then builds one tree for each of
`n_points` evenly spaced document counts, and always includes `n_max_docs`
itself. One row per tree is written to `dados_<tree>.csv` in the current
directory. The `TreeSizeBytes` column is always 0, because the statistics do
not fill it in. `treeindex.stats.tree_size` gives the size of a tree
separately.

## Library use

```python
from treeindex.avl import AVLTree
from treeindex.nodes import format_tree, format_index

tree = AVLTree()
tree.insert("banana", 1)
tree.insert("morango", 2)
result = tree.search("banana")
print(result.found, result.document_ids, result.num_comparisons)
print(format_tree(tree), end="")   # banana / "    +-- morango"
print(format_index(tree), end="")  # "banana: 1" / "morango: 2"
```

- `treeindex.bst.BinarySearchTree`, `treeindex.avl.AVLTree` and
  `treeindex.rbt.RedBlackTree` share the `BinaryTree` interface from
  `treeindex.nodes`:
  - `insert` returns an `InsertResult`.
  - `search` returns a `SearchResult`.
  - `nodes()` yields the nodes in word order.
- `treeindex.nodes` also has `format_index`, `print_index`, `format_tree` and
  `print_tree`.
- `treeindex.stats` has `make_tree(tree_type)`. It also has these shape
  measurements, each taking a node and an optional sentinel: `tree_height`,
  `min_branch`, `collect_words`, `tree_size` and `all_balanced`.
- `treeindex.stats.tree_stats(tree_type, n_docs, n_max_docs, docs)` computes a
  `TreeStats` record.
- `treeindex.export.export_to_csv(stats, title)` writes a list of `TreeStats`
  records to a CSV file.

## Limitations

The index lives only in memory. Every command rebuilds it from the documents,
and nothing is saved between runs. Words cannot be removed from a tree.