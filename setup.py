from setuptools import find_packages, setup

setup(
    name="oriented-mbr",
    version="0.1.0",
    packages=find_packages(include=["oriented_mbr", "oriented_mbr.*"]),
    install_requires=["pydantic>=2.0", "pydantic-settings>=2.0"],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ]
    },
    python_requires=">=3.9",
)
