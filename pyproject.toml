[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kitchensim"
version = "0.1.0"
description = "Time-step simulation of a restaurant kitchen: orders, cooks, breaks and promotions."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "restaurant", "queue", "time-step", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kitchensim = "kitchensim.restaurant:main"

[tool.hatch.build.targets.wheel]
packages = ["kitchensim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
