[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jupiter-design"
version = "0.1.0"
description = "Chainable builders that generate Tailwind CSS class strings for buttons, cards, layouts and interactive elements"
requires-python = ">=3.10"
dependencies = []
keywords = ["design-system", "ui", "tailwind", "css", "builder"]
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
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jupiter_design"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
