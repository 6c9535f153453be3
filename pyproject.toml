[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qtools"
version = "0.1.0"
description = "Tools for reading, transforming and analysing BNF grammars, plus a cQASM program model with semantic checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["grammar", "bnf", "ebnf", "start set", "follow set", "cqasm"]
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qtools = "qtools.cli:main"
gcopy = "qtools.cli:gcopy_main"
gdeebnf = "qtools.cli:gdeebnf_main"
gdeempty = "qtools.cli:gdeempty_main"
gsample = "qtools.cli:gsample_main"
gsqueeze = "qtools.cli:gsqueeze_main"
gstartfollow = "qtools.cli:gstartfollow_main"
gstats = "qtools.cli:gstats_main"

[tool.hatch.build.targets.wheel]
packages = ["qtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
