[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "topicboard"
version = "0.1.0"
description = "A small publish/subscribe broker with video-link and GPS publishers and followers"
requires-python = ">=3.10"
dependencies = []
keywords = ["publish-subscribe", "broker", "topics", "gps", "observer", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
topicboard = "topicboard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["topicboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
