[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "messager"
version = "0.1.0"
description = "A small HTTP service for creating, fetching and renaming chat rooms stored in MongoDB."
requires-python = ">=3.10"
keywords = ["rooms", "chat", "flask", "mongodb", "rest"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask>=2.2",
    "pymongo>=4.2",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
messager = "messager.app:main"

[tool.hatch.build.targets.wheel]
packages = ["messager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
