[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastcommon"
version = "1.0.0"
description = "Common building blocks: an AVL tree, a timing wheel, a base64 codec, a linked chain and memory pools"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "tree", "timer", "timing-wheel", "base64", "pool", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fastcommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
