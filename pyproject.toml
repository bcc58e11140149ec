[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical methods: Gram-Schmidt QR, minimisation, Monte Carlo and adaptive integration, root finding, Runge-Kutta and a tiny neural network"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "numerical-methods",
    "qr-decomposition",
    "gram-schmidt",
    "quasi-newton",
    "downhill-simplex",
    "monte-carlo",
    "halton",
    "adaptive-quadrature",
    "clenshaw-curtis",
    "newton-method",
    "runge-kutta",
    "neural-network",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
numlab-linear = "numlab.linear_demo:main"
numlab-minimization = "numlab.minimization_demo:main"
numlab-neural = "numlab.neural_demo:main"
numlab-montecarlo = "numlab.montecarlo_demo:main"
numlab-integration = "numlab.integration_demo:main"
numlab-roots = "numlab.roots_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.hatch.build.targets.sdist]
include = [
    "numlab",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"
