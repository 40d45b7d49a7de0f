[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridmdp"
version = "0.1.0"
description = "Value iteration and policy iteration for a stochastic grid-world Markov decision process"
requires-python = ">=3.10"
keywords = ["mdp", "reinforcement-learning", "value-iteration", "policy-iteration", "gridworld"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridmdp = "gridmdp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gridmdp"]

[tool.pytest.ini_options]
addopts = "-ra"
