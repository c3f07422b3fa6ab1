[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Small classic data structures and graph algorithms: linked list, stack, bracket checking, BFS/DFS, Prim and Dijkstra."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "stack", "brackets", "graph", "bfs", "dfs", "dijkstra", "prim", "minimum spanning tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-brackets = "structkit.brackets:main"
structkit-graph = "structkit.graph:main"
structkit-weighted-graph = "structkit.weighted_graph:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
