from setuptools import setup, find_packages

setup(
    name="planeicon",
    version="0.1.0",
    description="Pick a map icon for an aircraft from ADS-B feed fields",
    package_dir={"": "backend"},
    packages=find_packages(where="backend"),
    python_requires=">=3.10",
    install_requires=[
        "python-dateutil>=2.8",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "lint": [
            "black>=23.0",
            "flake8>=6.0",
        ],
    },
)
