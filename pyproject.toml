[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and small console programs built on them: AVL tree, doubly linked list, queues, expression tools and a restaurant ordering desk."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "avl-tree",
    "linked-list",
    "priority-queue",
    "queue",
    "postfix",
    "parentheses",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakit-parentheses = "dsakit.parentheses:main"
dsakit-infix = "dsakit.infix:main"
dsakit-priority-queue = "dsakit.priority_queue:main"
dsakit-quilt-orders = "dsakit.quilt_orders:main"
dsakit-restaurant = "dsakit.restaurant_app:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
