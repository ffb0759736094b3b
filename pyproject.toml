[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "sdnmap"
version = "1.0.0"
description = "Building blocks for an SDN topology editor: controller payload decoding, device connection rules and an ant-colony routing client"
requires-python = ">=3.10"
dependencies = []
keywords = ["sdn", "network", "topology", "ant colony", "routing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["sdnmap*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
