[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdfcore"
version = "0.1.0"
description = "RDF 1.1 and RDF-star data model, parser and formatter interfaces, and tools to run conformance test manifests"
requires-python = ">=3.10"
dependencies = []
keywords = ["rdf", "rdf-star", "semantic-web", "n-triples", "sparql", "linked-data"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rdfcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
