[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cowpuzzles"
version = "0.1.0"
description = "Solutions to eight bronze-level programming puzzles about cows, as library functions and small command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "puzzles", "algorithms", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cow-signal = "cowpuzzles.cow_signal:main"
speeding-ticket = "cowpuzzles.speeding_ticket:main"
lost-cow = "cowpuzzles.lost_cow:main"
bovine-shuffle = "cowpuzzles.bovine_shuffle:main"
bucket-list = "cowpuzzles.bucket_list:main"
measuring-traffic = "cowpuzzles.measuring_traffic:main"
block-game = "cowpuzzles.block_game:main"
team-tic-tac-toe = "cowpuzzles.team_tic_tac_toe:main"

[tool.hatch.build.targets.wheel]
packages = ["cowpuzzles"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
