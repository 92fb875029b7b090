from setuptools import setup, find_packages

setup(
    name="largest-files",
    version="1.0.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    description="Find the N largest files under a directory tree.",
    python_requires=">=3.8",
    install_requires=[
        "rich",
        "PyYAML",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "largest-files=largest_files.cli:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
