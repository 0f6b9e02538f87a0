[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lowlevelkit"
version = "0.1.0"
description = "Small systems exercises: prime factors, image blurring, a tiny todo HTTP API, TCP demos, object inspection and binutils wrappers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "prime-factors",
    "gaussian-blur",
    "sockets",
    "http",
    "todo",
    "nm",
    "objdump",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lowlevelkit-todo-api = "lowlevelkit.todo_api:main"
lowlevelkit-tcp-server = "lowlevelkit.tcp_demo:server_main"
lowlevelkit-tcp-client = "lowlevelkit.tcp_demo:client_main"
lowlevelkit-nm = "lowlevelkit.binutils:nm_main"
lowlevelkit-objdump = "lowlevelkit.binutils:objdump_main"

[tool.hatch.build.targets.wheel]
packages = ["lowlevelkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
