[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdnorigin"
version = "0.1.0"
description = "Models and builders for CloudFront distributions, origins, behaviors, functions and origin access controls driven by Kubernetes Ingress resources"
requires-python = ">=3.10"
dependencies = []
keywords = ["cloudfront", "cdn", "kubernetes", "ingress", "acm", "oac", "lambda-edge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cdnorigin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
