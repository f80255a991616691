from setuptools import setup, find_packages


setup(
    name = "keybst",
    version = "0.1.0",
    description = "unbalanced binary search tree with upsert semantics",
    packages = find_packages(exclude=["tests", "tests.*"]),
    python_requires = ">=3.7",
    extras_require = {
        "test": ["pytest", "hypothesis"],
        },
)
