from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="board-e2e",
    version="1.0.0",
    description="Browser test suite for a task board: named scenarios per card with tag behavior checks as fallback",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["board_e2e", "board_e2e.*"]),
    package_data={"board_e2e": ["data/*.json", "tests/*.py"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "Framework :: Pytest",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    entry_points={
        "console_scripts": [
            "board-e2e=board_e2e.cli:main",
        ],
    },
)
