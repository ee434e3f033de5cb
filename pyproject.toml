[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ordercleaner"
version = "1.0.0"
description = "HTTP service that cleans marketplace order lines into product, material, model and complementary items"
requires-python = ">=3.10"
keywords = ["orders", "e-commerce", "flask", "http", "cleaning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Office/Business",
]
dependencies = [
    "flask",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ordercleaner = "ordercleaner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ordercleaner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
