[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autohide"
version = "0.1.0"
description = "Hide Waybar on Hyprland and reveal it when the cursor is flicked to the top of the screen"
requires-python = ">=3.10"
dependencies = ["psutil"]
keywords = ["hyprland", "waybar", "autohide", "wayland", "status bar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
autohide = "autohide.daemon:main"
autohide_wd = "autohide.window_detect:main"

[tool.hatch.build.targets.wheel]
packages = ["autohide"]

[tool.pytest.ini_options]
addopts = "-ra"
