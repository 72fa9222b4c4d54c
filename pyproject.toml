[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalgo"
version = "0.1.0"
description = "Classic data structures and algorithms: searching, heaps, hash tables, graphs and string matching, with interactive menus."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-search",
    "heap",
    "hash-table",
    "graph",
    "dijkstra",
    "kruskal",
    "prim",
    "topological-sort",
    "string-search",
    "kmp",
    "boyer-moore",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalgo-binary-search = "dsalgo.binary_search:main"
dsalgo-max-heap = "dsalgo.max_heap:main"
dsalgo-chaining-hash = "dsalgo.chaining_hash_table:main"
dsalgo-open-addressing = "dsalgo.open_addressing:main"
dsalgo-adjacency-list = "dsalgo.adjacency_list:main"
dsalgo-dfs = "dsalgo.graph_dfs:main"
dsalgo-bfs = "dsalgo.graph_bfs:main"
dsalgo-kruskal = "dsalgo.kruskal:main"
dsalgo-prim = "dsalgo.prim:main"
dsalgo-dijkstra = "dsalgo.dijkstra:main"
dsalgo-topological-sort = "dsalgo.topological_sort:main"
dsalgo-brute-force = "dsalgo.string_search:main"
dsalgo-kmp = "dsalgo.kmp:main"
dsalgo-boyer-moore = "dsalgo.boyer_moore:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalgo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
