[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contactbook"
version = "0.1.0"
description = "In-memory contact book with admin and staff users, contacts and contact details"
requires-python = ">=3.10"
dependencies = []
keywords = ["contacts", "address book", "users", "permissions"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contactbook = "contactbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contactbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
