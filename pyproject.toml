[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "creature-sighting"
version = "0.1.0"
description = "A small WSGI web application that generates and displays fictional creature sightings"
requires-python = ">=3.10"
dependencies = []
keywords = ["kaiju", "wsgi", "web", "generator", "fiction"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
creature-sighting = "creature_sighting.server:main"

[tool.hatch.build.targets.wheel]
packages = ["creature_sighting"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
