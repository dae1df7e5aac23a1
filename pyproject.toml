[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "treeindex"
version = "0.1.0"
description = "Inverted word index over text documents using BST, AVL and red-black trees, with performance statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["inverted index", "binary search tree", "avl", "red-black tree", "benchmark"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treeindex-bst = "treeindex.cli:bst_main"
treeindex-avl = "treeindex.cli:avl_main"
treeindex-rbt = "treeindex.cli:rbt_main"
treeindex-stats = "treeindex.cli:stats_main"

[tool.setuptools.packages.find]
include = ["treeindex*"]

[tool.pytest.ini_options]
addopts = "-ra"
