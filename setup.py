"""Setup script for OOP Lessons."""

from setuptools import setup, find_packages

setup(
    name="oop_lessons",
    version="0.1.0",
    description="Introductory object-oriented programming examples",
    author="OOP Lessons",
    python_requires=">=3.10",
    packages=find_packages(include=["oop_lessons", "oop_lessons.*"]),
    install_requires=[
        line.strip()
        for line in open("requirements.txt")
        if line.strip() and not line.startswith("#") and not line.startswith("git+")
    ],
    extras_require={
        "dev": [
            "black>=23.0.0",
            "isort>=5.12.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "oop-lessons=oop_lessons.cli:main",
        ]
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
