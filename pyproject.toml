[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "craftserve"
version = "0.1.0"
description = "Building blocks for a Minecraft-protocol game server: wire buffers, chat formatting, encryption, tasks and world storage"
requires-python = ">=3.10"
keywords = ["minecraft", "protocol", "server", "nbt", "varint", "chunk", "cfb8"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["craftserve"]

[tool.pytest.ini_options]
addopts = "-ra"
