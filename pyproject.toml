[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftpshell"
version = "0.1.0"
description = "A small interactive FTP client that uses passive mode for transfers."
requires-python = ">=3.10"
dependencies = []
keywords = ["ftp", "client", "shell", "passive", "file-transfer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: File Transfer Protocol (FTP)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftpshell = "ftpshell.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ftpshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
