[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proxyparse"
version = "0.1.0"
description = "Parse absolute-URI HTTP GET requests as a forward proxy receives them, and rebuild them"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "proxy", "request", "parser", "headers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Proxy Servers",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
proxyparse-server = "proxyparse.server:main"

[tool.hatch.build.targets.wheel]
packages = ["proxyparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
