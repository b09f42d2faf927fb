from pathlib import Path

from setuptools import setup, find_packages

# Version components live in the package; see src/lvlog/_version.py
_version = {}
exec((Path(__file__).parent / "src" / "lvlog" / "_version.py").read_text(encoding="utf-8"), _version)

setup(
    name="lvlog",
    version=_version["PIP_VERSION"],
    description="Leveled logging facade — console, colour and structured backends behind one runtime-switchable global level",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "colorama>=0.4.6",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "lvlog=lvlog.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.11",
)
