[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barert"
version = "0.1.0"
description = "Low-level runtime pieces: message formatting, growable buffers, a bump arena, an object pool, a circular buffer, Moscow-time formatting and exception-raising system-call wrappers."
requires-python = ">=3.10"
keywords = ["runtime", "buffer", "arena", "pool", "epoll", "syscall", "errno", "rfc822"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["barert"]

[tool.pytest.ini_options]
addopts = "-ra"
