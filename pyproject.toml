[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bistro"
version = "0.1.0"
description = "Restaurant service over one SQLite database: kitchen fire orders, floor seating and menu, and food-cost finance, served over HTTP."
requires-python = ">=3.10"
keywords = ["restaurant", "kitchen", "floor", "food cost", "sqlite", "flask", "domain-driven design"]
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
    "Topic :: Office/Business",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask>=2.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
bistro = "bistro.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bistro"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
