[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uwskit"
version = "0.1.0"
description = "Building blocks for HTTP and WebSocket servers: chunked decoding, header bloom filter, backpressure buffer, error responses, option parsing and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "websocket", "chunked", "bloom-filter", "getopt", "crc32"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["uwskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
