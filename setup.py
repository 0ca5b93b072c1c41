"""Setup script for textcal."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read requirements, separating out test tooling
requirements_file = Path(__file__).parent / "requirements.txt"
requirements = []
dev_requirements = []

if requirements_file.exists():
    for line in requirements_file.read_text().strip().split("\n"):
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue

        if "pytest" in line:
            dev_requirements.append(line)
        else:
            requirements.append(line)

setup(
    name="textcal",
    version="1.0.0",
    description="Configurable monthly calendars as plain text or markup",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="textcal contributors",
    url="https://github.com/mattgemmell/Calendar",
    packages=find_packages(exclude=["tests*", "docs*"]),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Office/Business :: Scheduling",
        "Topic :: Text Processing :: Markup :: HTML",
    ],
    keywords="calendar cal terminal html text",
    entry_points={
        "console_scripts": [
            "textcal=textcal.__main__:main",
        ],
    },
    package_data={
        "textcal": ["py.typed"],
    },
    zip_safe=False,
)
