[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tallerdatos"
version = "0.1.0"
description = "Data-structure exercises: heaps, graphs, hash tables and a small arithmetic lexer"
requires-python = ">=3.10"
dependencies = []
keywords = ["heap", "priority queue", "graph", "topological sort", "hash table", "lexer", "dfa"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tallerdatos-pq = "tallerdatos.priority_queue:main"
tallerdatos-logheap = "tallerdatos.log_heap:main"
tallerdatos-adjacency = "tallerdatos.adjacency:main"
tallerdatos-toposort = "tallerdatos.toposort:main"
tallerdatos-plates = "tallerdatos.plate_table:main"
tallerdatos-network = "tallerdatos.network_graph:main"
tallerdatos-domains = "tallerdatos.domain_table:main"
tallerdatos-lexer = "tallerdatos.lexer_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tallerdatos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
