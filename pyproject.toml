[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dreamengine"
version = "0.1.0"
description = "A small game engine core: levelled logging, frame timers, memory arenas and a main loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "timer", "logging", "allocator", "game-loop"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dreamengine-sample = "dreamengine.sample_game:main"
dreamengine-editor = "dreamengine.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["dreamengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
