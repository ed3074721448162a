[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "magmacore"
version = "0.2.0"
description = "CRC checksums, fast hashes, ASCII character classes, byte-string comparison and thread-safe containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["crc24", "crc32", "adler32", "fletcher32", "murmur", "checksum", "object pool", "fifo"]
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
packages = ["magmacore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
