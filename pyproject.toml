[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filecaches"
version = "0.1.0"
description = "File-backed JSON caches for HTTP responses and local AI model chat history"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["cache", "http", "json", "ollama", "chat"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
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
test = [
    "pytest",
    "responses",
]

[project.scripts]
filecaches-chat = "filecaches.chat_cli:main"
filecaches-fetch = "filecaches.fetch_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filecaches"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
