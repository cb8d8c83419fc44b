[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcbench"
version = "0.1.0"
description = "Small command-line tools: polynomial arithmetic, infix expression evaluation and social-graph reachability analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["polynomial", "expression", "postfix", "shunting-yard", "graph", "bfs", "kevin-bacon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calcbench-poly = "calcbench.polynomial:main"
calcbench-expr = "calcbench.expression:main"
calcbench-graph = "calcbench.social_graph:main"

[tool.hatch.build.targets.wheel]
packages = ["calcbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
