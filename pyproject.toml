[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kongclient"
version = "0.1.0"
description = "Client library for the Kong Admin API: consumers, credentials, CA certificates, developer roles, admins and custom entity endpoints"
requires-python = ">=3.10"
dependencies = []
keywords = ["kong", "api-gateway", "admin-api", "client"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kongclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
