[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primers"
version = "0.1.0"
description = "Small worked examples: sums, greetings, a dictionary, a countdown, a wallet and shapes"
requires-python = ">=3.10"
dependencies = []
keywords = ["examples", "learning", "test-driven", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
primers-greet = "primers.greeting:main"
primers-countdown = "primers.countdown:main"

[tool.hatch.build.targets.wheel]
packages = ["primers"]

[tool.pytest.ini_options]
addopts = "-ra"
