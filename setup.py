from setuptools import setup, find_packages

setup(
    name="toolrent-cli",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "click>=8.0",
        "requests>=2.25",
        "python-dotenv>=1.0",
        "rich>=13.0",
        "python-dateutil>=2.8",
        "tenacity>=8.2.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "toolrent=toolrent.cli.app:cli",
        ],
    },
    python_requires=">=3.8",
)
