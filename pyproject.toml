[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwreport"
version = "0.1.0"
description = "Read hardware and system information on Linux from sysfs and procfs"
requires-python = ">=3.10"
dependencies = []
keywords = ["hardware", "cpu", "gpu", "ram", "battery", "disk", "sysfs", "procfs", "system information"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hwreport = "hwreport.report:main"

[tool.hatch.build.targets.wheel]
packages = ["hwreport"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
