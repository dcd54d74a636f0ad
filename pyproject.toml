[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anniversary_widget"
version = "0.1.0"
description = "A small borderless desktop widget counting down to an anniversary, with one-time milestone notifications."
requires-python = ">=3.10"
dependencies = []
keywords = ["countdown", "widget", "desktop", "anniversary", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
anniversary-widget = "anniversary_widget.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["anniversary_widget"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
